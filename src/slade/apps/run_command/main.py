# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

import sys
from collections.abc import Sequence

from ...errors import exit_code_for
from ...lib.core.config import registry_file_path as _registry_file_path
from ...ui_utils import console
from .application import RunCommandConsoleApplication
from .context import RunCommandApplicationContext


def main(argv: Sequence[str] | None = None) -> int:
    arguments = sys.argv[1:] if argv is None else list(argv)
    try:
        context = RunCommandApplicationContext(_registry_file_path())
        application = RunCommandConsoleApplication(context, arguments)
        return int(application.run())
    except Exception as e:
        console.error(str(e))
        return int(exit_code_for(e))
