# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Entry point for ``python -m slade.apps.simple_communication``."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
