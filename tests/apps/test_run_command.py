# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the slade-run program launcher."""

import unittest
import unittest.mock

from test_utils import isolated_env

from slade.apps.run_command.application import RunCommandConsoleApplication, start_process
from slade.apps.run_command.context import RunCommandApplicationContext
from slade.apps.run_command.main import main
from slade.apps.run_command.registry import ProgramRegistry
from slade.errors import ExitCode, RegistryFormatError


class InMemoryContext:
    """Registry context that keeps everything in memory and counts saves."""

    def __init__(self, registrations: ProgramRegistry | None = None) -> None:
        self.program_registrations = registrations if registrations is not None else ProgramRegistry()
        self.saved = 0

    def load(self) -> None:
        pass

    def save(self) -> None:
        self.saved += 1


class RunCommandApplicationTests(unittest.TestCase):
    """Verify the register and launch commands."""

    def setUp(self) -> None:
        self.env = self.enterContext(isolated_env())

    def test_register_single_program(self) -> None:
        """A name;path pair is stored and the context saved."""
        context = InMemoryContext()
        app = RunCommandConsoleApplication(context, [r"/register=single;C:\path\to\program.exe"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertEqual(dict(context.program_registrations), {"single": r"C:\path\to\program.exe"})
        self.assertEqual(context.saved, 1)
        self.assertIn("successfully made under 'single'", self.env.stdout.getvalue())

    def test_override_registration(self) -> None:
        """Registering an existing name warns and replaces the path."""
        context = InMemoryContext(ProgramRegistry([("single", r"C:\path\to\program.exe")]))
        app = RunCommandConsoleApplication(context, [r"/register=SINGLE;C:\i\have\been\changed.exe"])
        app.run()
        self.assertEqual(len(context.program_registrations), 1)
        self.assertEqual(context.program_registrations["single"], r"C:\i\have\been\changed.exe")
        self.assertIn("will be overridden", self.env.stdout.getvalue())

    def test_wrong_number_of_values(self) -> None:
        """Anything but two values is reported and changes nothing."""
        context = InMemoryContext()
        app = RunCommandConsoleApplication(context, ["/register=a;b;c"])
        self.assertEqual(app.run(), ExitCode.OK)
        self.assertEqual(len(context.program_registrations), 0)
        self.assertIn("Invalid number of values", self.env.stderr.getvalue())

    def test_single_value_is_not_a_string_array(self) -> None:
        """A single value cannot be converted to a string array."""
        context = InMemoryContext()
        app = RunCommandConsoleApplication(context, ["/register=lonely"])
        self.assertEqual(app.run(), ExitCode.NOT_SUPPORTED)
        self.assertEqual(len(context.program_registrations), 0)

    def test_launch_registered_program(self) -> None:
        """Launch looks the name up case-insensitively and starts the path."""
        launcher = unittest.mock.Mock()
        context = InMemoryContext(ProgramRegistry([("editor", "/usr/bin/editor")]))
        app = RunCommandConsoleApplication(context, ["/launch=Editor"], launcher=launcher)
        self.assertEqual(app.run(), ExitCode.OK)
        launcher.assert_called_once_with("/usr/bin/editor")

    def test_launch_unknown_name_does_not_start_anything(self) -> None:
        """An unknown name warns and starts nothing."""
        launcher = unittest.mock.Mock()
        app = RunCommandConsoleApplication(InMemoryContext(), ["/launch=ghost"], launcher=launcher)
        self.assertEqual(app.run(), ExitCode.OK)
        launcher.assert_not_called()
        self.assertIn("No registration exists under the name 'ghost'", self.env.stdout.getvalue())

    def test_launch_failure_reported(self) -> None:
        """A launcher error fails the command with its message."""
        launcher = unittest.mock.Mock(side_effect=FileNotFoundError("missing"))
        context = InMemoryContext(ProgramRegistry([("x", "/nope")]))
        app = RunCommandConsoleApplication(context, ["/launch=x"], launcher=launcher)
        self.assertEqual(app.run(), ExitCode.EXECUTION_FAILED)
        self.assertIn("missing", self.env.stderr.getvalue())

    def test_colon_is_not_a_separator(self) -> None:
        """Only "=" separates keys from values."""
        context = InMemoryContext()
        RunCommandConsoleApplication(context, ["/register:a;b"]).run()
        self.assertEqual(len(context.program_registrations), 0)

    def test_help(self) -> None:
        """Help lists both commands in sorted order."""
        RunCommandConsoleApplication(InMemoryContext(), ["/help"]).run()
        self.assertIn("Supported commands: launch, register", self.env.stdout.getvalue())

    @unittest.mock.patch("subprocess.Popen")
    def test_start_process(self, popen: unittest.mock.Mock) -> None:
        """The default launcher starts the program in its own session."""
        start_process("/usr/bin/true")
        args, kwargs = popen.call_args
        self.assertEqual(args[0], ["/usr/bin/true"])
        self.assertTrue(kwargs["start_new_session"])


class RunCommandPersistenceTests(unittest.TestCase):
    """Verify registrations survive a save and reload."""

    def setUp(self) -> None:
        self.env = self.enterContext(isolated_env())
        self.registry_file = self.env.base / "data" / "run.data"

    def _run(self, *arguments: str) -> RunCommandApplicationContext:
        context = RunCommandApplicationContext(self.registry_file)
        RunCommandConsoleApplication(context, list(arguments)).run()
        return context

    def test_missing_file_loads_empty(self) -> None:
        """A missing registry file loads as an empty registry."""
        context = RunCommandApplicationContext(self.registry_file)
        context.load()
        self.assertEqual(len(context.program_registrations), 0)

    def test_last_registration_wins_after_round_trip(self) -> None:
        """Re-registering a name across runs keeps the latest path."""
        self._run("/register=single;/opt/p1")
        self._run("/register=single;/opt/p2")

        reloaded = RunCommandApplicationContext(self.registry_file)
        reloaded.load()
        self.assertEqual(dict(reloaded.program_registrations), {"single": "/opt/p2"})

    def test_registrations_accumulate_in_insertion_order(self) -> None:
        """Registrations from several runs keep insertion order."""
        self._run("/register=b;/bin/b", "/register=a;/bin/a")
        self._run("/register=c;/bin/c")
        reloaded = RunCommandApplicationContext(self.registry_file)
        reloaded.load()
        self.assertEqual(list(reloaded.program_registrations), ["b", "a", "c"])

    def test_unencodable_registration_keeps_registry_loadable(self) -> None:
        """A path that is not valid UTF-8 is rejected and earlier registrations survive."""
        self._run("/register=good;/bin/good")
        before = self.registry_file.read_bytes()

        context = RunCommandApplicationContext(self.registry_file)
        exit_code = RunCommandConsoleApplication(context, ["/register=bad;/opt/\udcff"]).run()

        self.assertEqual(exit_code, ExitCode.EXECUTION_FAILED)
        self.assertIn("valid UTF-8", self.env.stderr.getvalue())
        self.assertEqual(self.registry_file.read_bytes(), before)
        reloaded = RunCommandApplicationContext(self.registry_file)
        reloaded.load()
        self.assertEqual(dict(reloaded.program_registrations), {"good": "/bin/good"})

    def test_failed_save_leaves_previous_file_intact(self) -> None:
        """A registry that cannot be encoded is never half-written to disk."""
        self._run("/register=good;/bin/good")
        before = self.registry_file.read_bytes()

        context = RunCommandApplicationContext(self.registry_file)
        context.load()
        context.program_registrations["bad"] = "/opt/\udcff"
        with self.assertRaises(RegistryFormatError):
            context.save()

        self.assertEqual(self.registry_file.read_bytes(), before)
        self.assertEqual([p.name for p in self.registry_file.parent.iterdir()], ["run.data"])

    def test_save_creates_parent_directory(self) -> None:
        """Saving into a directory that does not exist yet creates it."""
        context = RunCommandApplicationContext(self.registry_file)
        context.program_registrations["tool"] = "/bin/tool"
        context.save()
        self.assertEqual(self.registry_file.read_bytes(), b"\x01\x00\x00\x00\x04tool\t/bin/tool")
        self.assertEqual([p.name for p in self.registry_file.parent.iterdir()], ["run.data"])


class RunCommandMainTests(unittest.TestCase):
    """Verify the slade-run entry point."""

    def test_main_uses_configured_registry_file(self) -> None:
        """run.registry_file in the global config picks the registry file."""
        with isolated_env() as env:
            registry_file = env.base / "custom.data"
            env.config_file.write_text(f"run:\n  registry_file: {registry_file}\n", encoding="utf-8")
            self.assertEqual(main(["/register=tool;/bin/tool"]), 0)
            self.assertTrue(registry_file.is_file())

    def test_env_var_overrides_config(self) -> None:
        """SLADE_REGISTRY_FILE wins over the config file."""
        with isolated_env() as env:
            target = env.base / "env.data"
            with unittest.mock.patch.dict("os.environ", {"SLADE_REGISTRY_FILE": str(target)}):
                main(["/register=tool;/bin/tool"])
            self.assertTrue(target.is_file())

    def test_main_reports_corrupt_registry(self) -> None:
        """A corrupt registry file is reported with the unexpected-error code."""
        with isolated_env({"SLADE_REGISTRY_FILE": ""}) as env:
            env.state_dir.mkdir(parents=True, exist_ok=True)
            (env.state_dir / "run.data").write_bytes(b"\x05\x00")
            self.assertEqual(main(["/help"]), int(ExitCode.UNEXPECTED))
            self.assertIn("Unexpected end of registry data", env.stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
