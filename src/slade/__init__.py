"""slade package.

Modules:
- slade.parsing: rule sets, the command-line parser and parsed results
- slade.conversion: converters from raw command values to handler types
- slade.commands: command registrar and the console application base class
- slade.errors: error kinds and process exit codes
- slade.apps: sample applications (slade-run, slade-comm)
- slade.lib: config, paths, logging and small internal helpers
- slade.ui_utils: colour-coded console output
"""

__all__ = [
    "parsing",
    "conversion",
    "commands",
    "errors",
    "apps",
    "lib",
    "ui_utils",
]

try:
    from importlib.metadata import version

    __version__ = version("slade")
except Exception:
    __version__ = "unknown"
