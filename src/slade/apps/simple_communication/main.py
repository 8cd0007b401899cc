# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

import sys
from collections.abc import Sequence

from ...errors import exit_code_for
from ...ui_utils import console
from .application import (
    SimpleCommunicationApplicationContext,
    SimpleCommunicationConsoleApplication,
)


def main(argv: Sequence[str] | None = None) -> int:
    arguments = sys.argv[1:] if argv is None else list(argv)
    try:
        context = SimpleCommunicationApplicationContext()
        application = SimpleCommunicationConsoleApplication(context, arguments)
        return int(application.run())
    except Exception as e:
        console.error(str(e))
        return int(exit_code_for(e))
