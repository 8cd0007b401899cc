# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root
from .paths import state_root as _state_root_base

COLOR_MODES = ("auto", "always", "never")


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If SLADE_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (SLADE_CONFIG_DIR, /etc/slade for root,
           otherwise the platformdirs user config dir)
        2) sys.prefix/etc/slade/config.yml
        3) /etc/slade/config.yml
    """
    env_file = os.environ.get("SLADE_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "slade" / "config.yml"
    etc_cfg = Path("/etc/slade/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit SLADE_CONFIG_FILE is returned even if missing to make the
    intent visible to the user. If nothing exists, the last candidate
    (/etc/slade/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    return yaml.safe_load(cfg_path.read_text()) or {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``run: "oops"``),
    returns ``{}`` so callers can rely on ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path],
) -> Path:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        try:
            section = get_global_section(config_key[0])
            val = section.get(config_key[1])
            if val:
                return Path(val).expanduser().resolve()
        except (OSError, KeyError, TypeError, yaml.YAMLError):
            pass

    return default().resolve()


def state_root() -> Path:
    """Writable state directory.

    Precedence:
    - Environment variable SLADE_STATE_DIR
    - Global config: paths.state_root
    - slade.lib.core.paths.state_root() (platform default)
    """
    return _resolve_path("SLADE_STATE_DIR", ("paths", "state_root"), _state_root_base)


def registry_file_path() -> Path:
    """Location of the run application's program registry.

    Precedence:
    - Environment variable SLADE_REGISTRY_FILE
    - Global config: run.registry_file
    - state_root()/run.data
    """
    return _resolve_path(
        "SLADE_REGISTRY_FILE", ("run", "registry_file"), lambda: state_root() / "run.data"
    )


def get_console_color_mode() -> str:
    """Return ``console.color`` from the global config (auto, always or never)."""
    try:
        mode = str(get_global_section("console").get("color", "auto")).lower()
    except (OSError, yaml.YAMLError):
        return "auto"
    return mode if mode in COLOR_MODES else "auto"
