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
Preset initialization: selection, validation, conflict checks and writing.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..COMPOSERS.compose_composer import COMPOSE_FILE, ComposeComposer
from ..errors import NoTerminalError, PresetFilesExistError, UnknownPresetError
from ..REGISTRY.preset_registry import PresetRegistry
from ..REGISTRY.template_store import TemplateStore
from ..UTILS.output import Output
from ..UTILS.shell import PromptSelect, TerminalChecker
from .file_manager import FileManager


@dataclass
class PresetRun:
    """Outcome of a preset initialization."""
    preset: str
    language: str = ""
    database: str = ""
    default_compose: bool = True
    written: List[str] = field(default_factory=list)


class PresetManager:
    """
    Initializes a preset in the destination directory.

    When no preset is given the user is asked for a language, a preset and,
    if the preset offers any, a database. Presets picked that way get a
    docker-compose.yml composed from service templates; presets given by
    name keep their own static compose file.
    """

    def __init__(self,
                 registry: PresetRegistry,
                 store: TemplateStore,
                 file_manager: Optional[FileManager] = None,
                 output: Optional[Output] = None,
                 terminal: Optional[TerminalChecker] = None,
                 prompt: Optional[PromptSelect] = None,
                 composer: Optional[ComposeComposer] = None):
        self.registry = registry
        self.store = store
        self.file_manager = file_manager or FileManager()
        self.output = output or Output()
        self.terminal = terminal or TerminalChecker()
        self.prompt = prompt or PromptSelect()
        self.composer = composer or ComposeComposer(store)

    def execute(self, preset: Optional[str] = None, override: bool = False) -> PresetRun:
        """
        Runs the preset initialization.

        :param preset: Preset identifier; prompts interactively when omitted.
        :param override: Overwrite existing files instead of aborting.
        :return: Details about the run.
        :raises NoTerminalError: No preset given and no TTY available.
        :raises PromptInterruptedError: The user cancelled a prompt.
        :raises UnknownPresetError: The preset is not registered.
        :raises PresetFilesExistError: Files exist and override is off.
        :raises TemplateParseError: The compose file could not be composed.
        :raises FileWriteError: A file could not be written.
        """
        run = self.select(preset)

        if not self.registry.exists(run.preset):
            raise UnknownPresetError(run.preset)

        self.output.println("Preset", run.preset, "is initializing!")

        if not override:
            self.check_conflicts(run.preset)

        files = self.resolve_files(run)
        run.written = self.file_manager.write_all(files)

        self.output.success("Preset ", run.preset, " initialized!")
        return run

    def select(self, preset: Optional[str] = None) -> PresetRun:
        """
        Decides which preset to initialize, prompting when none is given.
        """
        if preset is not None:
            return PresetRun(preset=preset, default_compose=True)

        if not self.terminal.is_terminal():
            raise NoTerminalError()

        language = self.prompt.ask("What language do you want to use", self.registry.get_languages())
        preset = self.prompt.ask("What preset do you want to use", self.registry.get_presets(language))

        database = ""
        found = self.registry.get(preset)
        if found is not None and found.database_options:
            database = self.prompt.ask("What database do you want to use", found.database_options)

        return PresetRun(preset=preset, language=language, database=database, default_compose=False)

    def check_conflicts(self, preset: str) -> None:
        """
        Warns about every preset file already present, then aborts if any.
        """
        existing = self.file_manager.check_existing(self.registry.look_up_files(preset))
        for file_name in existing:
            self.output.warning("Preset file ", file_name, " already exists.")

        if existing:
            raise PresetFilesExistError(existing)

    def resolve_files(self, run: PresetRun) -> List[Tuple[str, str]]:
        """
        Final (file name, content) pairs, composing the compose file when needed.

        Everything is resolved before the first write, so a template failure
        leaves the destination untouched.
        """
        files = []
        for file_name, content in self.registry.get_preset_contents(run.preset).items():
            if file_name == COMPOSE_FILE and not run.default_compose:
                content = self.composer.compose(run.database, file_name)
            files.append((file_name, content))
        return files
