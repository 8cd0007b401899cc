# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import getpass
import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "slade"


def _is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def config_root() -> Path:
    """
    Base directory for configuration.

    Priority:
      1. SLADE_CONFIG_DIR
      2. if root   → /etc/slade
         else      → platformdirs user config dir (~/.config/slade on Linux)
    """
    env = os.getenv("SLADE_CONFIG_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/etc") / APP_NAME

    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (program registry, debug log).

    Priority:
      1. SLADE_STATE_DIR
      2. if root   → /var/lib/slade
         else      → platformdirs user data dir (~/.local/share/slade on Linux)
    """
    env = os.getenv("SLADE_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/var/lib") / APP_NAME

    return Path(user_data_dir(APP_NAME))
