"""
Line oriented reporting for the command line.
"""
import click


class Output:
    """
    Writes success, warning and error lines to the terminal.

    Warnings and errors go to stderr.
    """

    def println(self, *parts) -> None:
        click.echo(" ".join(str(p) for p in parts))

    def success(self, *parts) -> None:
        click.secho("".join(str(p) for p in parts), fg="green")

    def warning(self, *parts) -> None:
        click.secho("".join(str(p) for p in parts), fg="yellow", err=True)

    def error(self, err) -> None:
        click.secho(f"Error: {err}", fg="red", err=True)
