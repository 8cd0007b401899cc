# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ConsoleApplication dispatch loop."""

import unittest
import unittest.mock

from test_utils import isolated_env

from slade.commands import ConsoleApplication, ExecutableCommandRegistrar
from slade.conversion import ObjectConverter
from slade.errors import ExitCode, InvalidArgumentError
from slade.parsing import CommandPrefixes, CommandSeparators


class RecordingContext:
    """Context that records load and save calls."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def load(self) -> None:
        self.calls.append("load")

    def save(self) -> None:
        self.calls.append("save")


class SampleApplication(ConsoleApplication):
    """Application with a few recording commands and one that always fails."""

    def __init__(self, context, arguments) -> None:
        super().__init__(context, arguments)
        self.received: list[tuple[str, object]] = []
        self.configure(prefixes=CommandPrefixes.FORWARD_SLASH, separators=CommandSeparators.EQUALS)

    def register_commands(self, registrar: ExecutableCommandRegistrar) -> None:
        registrar.register("zeta", lambda value: self.received.append(("zeta", value)))
        registrar.register("Alpha", lambda value: self.received.append(("alpha", value)))
        registrar.register("many", lambda value: self.received.append(("many", value)), list)
        registrar.register("boom", self._boom)

    def _boom(self, value: str) -> None:
        raise RuntimeError(f"boom: {value}")


class FloatObjectConverter(ObjectConverter):
    target_type = float

    def convert_core(self, value):
        return float(value)


class RateApplication(SampleApplication):
    """Adds a float-valued command backed by a custom converter."""

    def register_commands(self, registrar: ExecutableCommandRegistrar) -> None:
        super().register_commands(registrar)
        self.converter_factory.register(float, FloatObjectConverter)
        registrar.register("rate", lambda value: self.received.append(("rate", value)), float)


class ConsoleApplicationTests(unittest.TestCase):
    """Verify parsing, help and dispatch in ConsoleApplication.run."""

    def setUp(self) -> None:
        self.env = self.enterContext(isolated_env())
        self.context = RecordingContext()

    def test_context_loaded_on_construction_and_saved_after_run(self) -> None:
        """The context is loaded when built and saved after running."""
        app = SampleApplication(self.context, [])
        self.assertEqual(self.context.calls, ["load"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_dispatches_matching_commands_in_order(self) -> None:
        """Registered commands run in argument order, keys case-insensitive."""
        app = SampleApplication(self.context, ["/ZETA=1", "/unknown=2", "/alpha=3", "/many=a;b", "x"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertEqual(app.received, [("zeta", "1"), ("alpha", "3"), ("many", ["a", "b"])])

    def test_configure_does_not_touch_presets(self) -> None:
        """configure works on a copy of the rule set."""
        from slade.parsing import WINDOWS_PROFILE

        app = SampleApplication(self.context, [])
        self.assertEqual(app.rule_set.prefixes, CommandPrefixes.FORWARD_SLASH)
        self.assertEqual(
            WINDOWS_PROFILE.prefixes, CommandPrefixes.FORWARD_SLASH | CommandPrefixes.SINGLE_HYPHEN
        )

    def test_help_lists_sorted_names(self) -> None:
        """Help prints registered names sorted case-insensitively."""
        app = SampleApplication(self.context, ["/help"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertIn("Supported commands: Alpha, boom, many, zeta", self.env.stdout.getvalue())

    def test_help_as_keyless_value(self) -> None:
        """A key-less "help" value also triggers help."""
        app = SampleApplication(self.context, ["/=help"])
        app.run()
        self.assertIn("Supported commands:", self.env.stdout.getvalue())

    def test_no_help_output_without_help_command(self) -> None:
        """No command list is printed unless help is asked for."""
        SampleApplication(self.context, ["/zeta=1"]).run()
        self.assertNotIn("Supported commands", self.env.stdout.getvalue())

    def test_failure_is_isolated_by_default(self) -> None:
        """A failing command is reported and later commands still run."""
        app = SampleApplication(self.context, ["/boom=x", "/zeta=after"])
        self.assertEqual(app.run(), ExitCode.EXECUTION_FAILED)
        self.assertEqual(app.received, [("zeta", "after")])
        err = self.env.stderr.getvalue()
        self.assertIn("Command 'boom' failed", err)
        self.assertIn("boom: x", err)
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_stop_on_first_failure(self) -> None:
        """With continue_on_error off, dispatch stops at the first failure."""
        app = SampleApplication(self.context, ["/boom=x", "/zeta=after"])
        app.continue_on_error = False
        self.assertEqual(app.run(), ExitCode.EXECUTION_FAILED)
        self.assertEqual(app.received, [])
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_conversion_failure_exit_code(self) -> None:
        """A value of the wrong shape maps to NOT_SUPPORTED."""
        app = SampleApplication(self.context, ["/many=single"])
        self.assertEqual(app.run(), ExitCode.NOT_SUPPORTED)

    def test_switch_for_value_command_is_invalid_argument(self) -> None:
        """A switch given for a value command maps to INVALID_ARGUMENT."""
        app = SampleApplication(self.context, ["/zeta"])
        self.assertEqual(app.run(), ExitCode.INVALID_ARGUMENT)

    def test_handled_flags(self) -> None:
        """Only dispatched commands are marked handled."""
        app = SampleApplication(self.context, ["/zeta=1", "/other=2"])
        app.run()
        commands = list(app._commands)
        self.assertTrue(commands[0].handled)
        self.assertFalse(commands[1].handled)

    def test_unexpected_error_in_run_core_is_reported_and_context_saved(self) -> None:
        """An unexpected error is reported and the context still saved."""
        app = SampleApplication(self.context, ["/zeta=1"])
        with unittest.mock.patch.object(app, "run_core", side_effect=KeyError("bad")):
            self.assertEqual(app.run(), ExitCode.UNEXPECTED)
        self.assertIn("Application execution failed", self.env.stderr.getvalue())
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_parse_failure_reported(self) -> None:
        """A parser error yields PARSE_FAILED and a message on stderr."""
        app = SampleApplication(self.context, ["/zeta=1"])
        with unittest.mock.patch.object(app._parser, "parse", side_effect=ValueError("nope")):
            self.assertEqual(app.run(), ExitCode.PARSE_FAILED)
        self.assertIn("Failed to parse command-line arguments", self.env.stderr.getvalue())
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_commands_registered_once(self) -> None:
        """Running twice registers commands only once."""
        app = SampleApplication(self.context, ["/zeta=1"])
        with unittest.mock.patch.object(
            app, "register_commands", wraps=app.register_commands
        ) as register:
            app.run()
            app.run()
        register.assert_called_once()

    def test_failing_custom_converter_does_not_stop_dispatch(self) -> None:
        """A converter raising a plain exception only fails its own command."""
        app = RateApplication(self.context, ["/rate=fast", "/zeta=after"])
        self.assertEqual(app.run(), ExitCode.NOT_SUPPORTED)
        self.assertEqual(app.received, [("zeta", "after")])
        err = self.env.stderr.getvalue()
        self.assertIn("Command 'rate' failed", err)
        self.assertIn("fast", err)
        self.assertEqual(self.context.calls, ["load", "save"])

    def test_custom_converter_success(self) -> None:
        """A registered custom converter feeds its value type to the handler."""
        app = RateApplication(self.context, ["/rate=2.5"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertEqual(app.received, [("rate", 2.5)])

    def test_configure_strict(self) -> None:
        """configure(strict=True) makes the parser enforce the rule toggles."""
        app = SampleApplication(self.context, ["/many=a;b", "/zeta"])
        self.assertFalse(app.strict)
        app.configure(strict=True, allow_multiple_values=False, allow_switches=False)
        self.assertTrue(app.strict)
        self.assertEqual(app.run(), ExitCode.NOT_SUPPORTED)
        self.assertEqual([(c.key, c.value) for c in app._commands], [("many", "a;b")])

    def test_none_inputs_rejected(self) -> None:
        """A None context or argument list is rejected."""
        with self.assertRaises(InvalidArgumentError):
            SampleApplication(None, [])
        with self.assertRaises(InvalidArgumentError):
            SampleApplication(self.context, None)


if __name__ == "__main__":
    unittest.main()
