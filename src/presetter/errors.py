# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Errors raised while initializing a preset.

Every error carries the exit code the command line handler uses, so the
handler dispatches on the error type instead of on its message.
"""
from typing import List, Optional


class PresetterError(Exception):
    """Base exception for preset operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class UnknownPresetError(PresetterError):
    """The requested preset is not in the registry."""

    def __init__(self, preset: str) -> None:
        self.preset = preset
        super().__init__(f"Unknown preset {preset}")


class NoTerminalError(PresetterError):
    """No preset argument was given and there is no TTY to prompt on."""

    def __init__(self) -> None:
        super().__init__(
            "the input device is not a TTY; for non-tty environments, "
            "please specify a preset argument"
        )


class PresetFilesExistError(PresetterError):
    """
    Some of the preset files are already present at the destination.

    Recoverable by running again with --override.
    """

    def __init__(self, files: List[str]) -> None:
        self.files = list(files)
        super().__init__("some preset files already exist", exit_code=2)


class PromptInterruptedError(PresetterError):
    """The user cancelled an interactive prompt."""

    def __init__(self) -> None:
        super().__init__("prompt interrupted", exit_code=0)


class TemplateParseError(PresetterError):
    """
    A service template could not be turned into a mapping.

    :param file_name: The preset file that was being generated.
    :param category: The template category (app, database, cache).
    :param template: The template name inside the category.
    :param reason: The underlying failure.
    """

    def __init__(self, file_name: str, category: str, template: str, reason: str) -> None:
        self.file_name = file_name
        self.category = category
        self.template = template
        self.reason = reason
        super().__init__(
            f"Failed to write preset file {file_name}: "
            f"{category} template {template}: {reason}"
        )


class TemplateNotFoundError(TemplateParseError):
    """The template store has no entry for the requested name."""

    def __init__(self, category: str, template: str, file_name: Optional[str] = None) -> None:
        super().__init__(file_name or "", category, template, "template not found")

    def for_file(self, file_name: str) -> "TemplateNotFoundError":
        """Return a copy of this error bound to the file being generated."""
        return TemplateNotFoundError(self.category, self.template, file_name)


class FileWriteError(PresetterError):
    """Writing one of the preset files failed."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Failed to write preset file {file_name}: {reason}")
