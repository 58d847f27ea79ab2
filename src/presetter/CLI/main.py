"""
Command Line Interface for Presetter.
"""
import click
from ..errors import PresetFilesExistError, PresetterError, PromptInterruptedError
from ..MANAGERS.preset_manager import PresetManager
from ..REGISTRY.preset_registry import PresetRegistry
from ..REGISTRY.template_store import TemplateStore
from ..UTILS.output import Output


def build_manager(output: Output) -> PresetManager:
    """
    Builds a preset manager over the bundled catalog, writing to the current directory.
    """
    return PresetManager(
        registry=PresetRegistry.load_bundled(),
        store=TemplateStore.load_bundled(),
        output=output,
    )


@click.command()
@click.argument('preset', required=False)
@click.option('--override', is_flag=True, default=False, envvar='PRESETTER_OVERRIDE',
              help='Force replace local existing files with the preset files')
@click.option('--list', 'list_presets', is_flag=True, default=False,
              help='List the available presets grouped by language and exit')
@click.pass_context
def cli(ctx, preset, override, list_presets):
    """
    Initialize a preset in the current working directory.

    If no PRESET argument is specified you will be prompted to pick among
    the existing options.
    """
    ctx.ensure_object(dict)
    output = ctx.obj.get('output') or Output()
    manager = ctx.obj.get('manager') or build_manager(output)

    if list_presets:
        for language in manager.registry.get_languages():
            click.echo(f"{language}:")
            for name in manager.registry.get_presets(language):
                click.echo(f"  {name}")
        return

    try:
        manager.execute(preset, override=override)
    except PresetFilesExistError:
        output.warning("Some preset files already exist. In case you wanna override them, use --override.")
        ctx.exit(2)
    except PromptInterruptedError:
        output.warning("Operation Cancelled")
        ctx.exit(0)
    except PresetterError as e:
        output.error(e)
        ctx.exit(e.exit_code)


def main():
    """
    Main entry point for the CLI.
    """
    output = Output()
    cli(obj={'output': output, 'manager': build_manager(output)})


if __name__ == '__main__':
    main()
