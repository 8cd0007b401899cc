# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Register programs under short names and launch them by name.

::

    slade-run /register=editor;/usr/bin/gedit
    slade-run /launch=editor
    slade-run /help
"""

import subprocess
from collections.abc import Callable, Sequence
from typing import Protocol

from ...commands.application import ConsoleApplication
from ...commands.registrar import ExecutableCommandRegistrar
from ...errors import InvalidArgumentError, require_text
from ...lib.util.logging_utils import _log_debug
from ...parsing.rules import CommandPrefixes, CommandSeparators
from ...ui_utils import console
from .registry import ProgramRegistry

Launcher = Callable[[str], object]


class RunCommandContext(Protocol):
    program_registrations: ProgramRegistry

    def load(self) -> None: ...

    def save(self) -> None: ...


def start_process(program_path: str) -> subprocess.Popen:
    """Start *program_path* detached from our stdio and return immediately."""
    return subprocess.Popen(
        [program_path],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class RunCommandConsoleApplication(ConsoleApplication):
    def __init__(
        self,
        application_context: RunCommandContext,
        arguments: Sequence[str],
        launcher: Launcher = start_process,
    ) -> None:
        super().__init__(application_context, arguments)
        self.launcher = launcher
        self.configure(
            allow_multiple_values=True,
            allow_switches=False,
            prefixes=CommandPrefixes.FORWARD_SLASH,
            separators=CommandSeparators.EQUALS,
        )

    @property
    def program_registrations(self) -> ProgramRegistry:
        return self.application_context.program_registrations

    def register_commands(self, registrar: ExecutableCommandRegistrar) -> None:
        super().register_commands(registrar)
        registrar.register("register", self.handle_registration, list)
        registrar.register("launch", self.handle_launching, str)

    def handle_registration(self, registration_parameters: list[str]) -> None:
        if len(registration_parameters) != 2:
            console.error(
                "Invalid number of values specified for command registration. "
                "Please specify the name and program path."
            )
            return

        registration_name, program_path = registration_parameters
        require_text(registration_name, "registration_name")
        require_text(program_path, "program_path")
        try:
            registration_name.encode("utf-8")
            program_path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidArgumentError("Registration name and path must be valid UTF-8 text.") from e

        if registration_name in self.program_registrations:
            console.warning(
                f"A program has already been registered under the name '{registration_name}' "
                "and will be overridden."
            )

        self.program_registrations[registration_name] = program_path
        console.info(
            f"A registration has been successfully made under '{registration_name}' "
            f"for the path '{program_path}'."
        )

    def handle_launching(self, registration_name: str) -> None:
        program_path = self.program_registrations.get(registration_name)
        if program_path is None:
            console.warning(f"No registration exists under the name '{registration_name}'.")
            return

        _log_debug(f"launching '{registration_name}': {program_path}")
        self.launcher(program_path)
