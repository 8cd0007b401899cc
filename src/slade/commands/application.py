# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Base class for console applications driven by parsed commands.

A subclass configures the parser rules, registers its commands and lets
:meth:`ConsoleApplication.run` do the rest: parse the arguments, answer
``help``, dispatch every registered command and save the context.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..conversion.factory import ObjectConverterFactory
from ..errors import CommandExecutionError, ExitCode, SladeError, exit_code_for, require
from ..lib.util.logging_utils import _log_debug
from ..parsing.parser import CommandLineParser, CommandResult
from ..parsing.results import CommandResultSet
from ..parsing.rules import CommandLineRuleSet
from ..ui_utils import console
from .registrar import DispatchResult, ExecutableCommandRegistrar

HELP_COMMAND = "help"


class ApplicationContext(Protocol):
    """State an application loads before running and saves afterwards."""

    def load(self) -> None: ...

    def save(self) -> None: ...


def describe_error(exc: BaseException) -> str:
    """Return a message for *exc* that includes a handler's original error."""
    if isinstance(exc, CommandExecutionError) and exc.__cause__ is not None:
        return f"{exc}\n{exc.__cause__}"
    return str(exc)


class ConsoleApplication:
    """Parses arguments and dispatches them to registered command handlers.

    When ``continue_on_error`` is True (the default) a failing command is
    reported and dispatch moves on to the next one; otherwise the first
    failure ends dispatch. The context is saved in either case.
    """

    def __init__(self, application_context: ApplicationContext, arguments: Sequence[str]) -> None:
        require(application_context, "application_context")
        require(arguments, "arguments")

        self._converter_factory = ObjectConverterFactory()
        self._parser = CommandLineParser()
        self._registrar = ExecutableCommandRegistrar(self._converter_factory)
        self._arguments = list(arguments)
        self._commands: CommandResultSet | None = None
        self._initialized = False
        self.continue_on_error = True

        self.application_context = application_context
        self.application_context.load()

    @property
    def converter_factory(self) -> ObjectConverterFactory:
        return self._converter_factory

    @property
    def registrar(self) -> ExecutableCommandRegistrar:
        return self._registrar

    @property
    def rule_set(self) -> CommandLineRuleSet:
        return self._parser.rule_set

    @property
    def strict(self) -> bool:
        return self._parser.strict

    def configure(self, *, strict: bool | None = None, **changes) -> "ConsoleApplication":
        """Replace the parser rules with a copy of the current ones plus *changes*.

        *strict*, when given, switches the parser between enforcing the rule
        set's multi-value and switch toggles and ignoring them.
        """
        self._parser.rule_set = self._parser.rule_set.copy(**changes)
        if strict is not None:
            self._parser.strict = strict
        self._commands = None
        return self

    def register_commands(self, registrar: ExecutableCommandRegistrar) -> None:
        """Hook for subclasses to register their commands."""

    def initialize_core(self) -> None:
        """Hook for subclasses to run extra initialization before parsing."""

    def _initialize(self) -> None:
        if self._initialized:
            return
        self.register_commands(self._registrar)
        self.initialize_core()
        self._initialized = True

    def _ensure_arguments_parsed(self) -> CommandResultSet | None:
        if self._commands is None:
            try:
                parsed = self._parser.parse(self._arguments)
                self._commands = CommandResultSet(self._converter_factory, parsed)
            except Exception as e:
                console.error(f"Failed to parse command-line arguments:\n{e}")
                _log_debug(f"parse failed: {e!r}")
        return self._commands

    def run(self) -> ExitCode:
        """Run the application and return the exit code to report."""
        self._initialize()
        commands = self._ensure_arguments_parsed()

        exit_code = ExitCode.OK
        if commands is None:
            exit_code = ExitCode.PARSE_FAILED
        else:
            try:
                results = self.run_core(commands)
                failures = [r for r in results if not r.succeeded]
                if failures:
                    exit_code = exit_code_for(failures[0].error)
            except Exception as e:
                console.error(f"Application execution failed:\n{describe_error(e)}")
                _log_debug(f"run failed: {e!r}")
                exit_code = exit_code_for(e)

        self.application_context.save()
        return exit_code

    def run_core(self, commands: CommandResultSet) -> list[DispatchResult]:
        """Answer ``help`` and dispatch the registered commands.

        Overrides should normally call this implementation.
        """
        self._check_help_command(commands)
        return self._perform_automatic_command_execution(commands)

    def supported_command_names(self) -> list[str]:
        return sorted(self._registrar.get_names(), key=str.casefold)

    def _check_help_command(self, commands: Iterable[CommandResult]) -> None:
        help_commands = [command for command in commands if _is_help(command)]
        if not help_commands:
            return
        names = ", ".join(self.supported_command_names())
        console.info(f"Supported commands: {names}")
        for command in help_commands:
            command.handled = True

    def _perform_automatic_command_execution(
        self, commands: Iterable[CommandResult]
    ) -> list[DispatchResult]:
        results: list[DispatchResult] = []
        for command in commands:
            if not command.key:
                continue
            registration = self._registrar.get_command_registration(command.key)
            if registration is None:
                continue

            result = registration.try_execute(command)
            results.append(result)
            if result.succeeded:
                command.handled = True
                _log_debug(f"dispatched '{registration.name}'")
                continue

            self._report_failure(result)
            if not self.continue_on_error:
                break
        return results

    def _report_failure(self, result: DispatchResult) -> None:
        error: SladeError | None = result.error
        detail = describe_error(error) if error is not None else "unknown error"
        console.error(f"Command '{result.name}' failed:\n{detail}")
        _log_debug(f"command '{result.name}' failed: {error!r}")


def _is_help(command: CommandResult) -> bool:
    if command.key:
        return command.key.casefold() == HELP_COMMAND
    return isinstance(command.value, str) and command.value.casefold() == HELP_COMMAND
