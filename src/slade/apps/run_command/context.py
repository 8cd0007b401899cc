# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

import os
import tempfile
from pathlib import Path

from ...errors import require_text
from ...lib.util.logging_utils import _log_debug
from .registry import ProgramRegistry, dumps, loads


class RunCommandApplicationContext:
    """Program registrations persisted to a flat binary file.

    A missing file loads as an empty registry. Saving encodes the whole
    registry first, then swaps a temporary file in the same directory over
    the registry file, so a failed save leaves the previous file intact.
    """

    def __init__(self, file_path: str | Path) -> None:
        require_text(str(file_path) if file_path is not None else None, "file_path")
        self.file_path = Path(file_path)
        self.program_registrations = ProgramRegistry()

    def load(self) -> None:
        if not self.file_path.is_file():
            _log_debug(f"registry {self.file_path} not found, starting empty")
            return
        self.program_registrations.reset(loads(self.file_path.read_bytes()))
        _log_debug(f"loaded {len(self.program_registrations)} registrations from {self.file_path}")

    def save(self) -> None:
        data = dumps(self.program_registrations)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            dir=self.file_path.parent, prefix=f".{self.file_path.name}-", delete=False
        ) as tmp:
            tmp.write(data)
            tmp_path = Path(tmp.name)

        try:
            os.replace(tmp_path, self.file_path)
        finally:
            tmp_path.unlink(missing_ok=True)
        _log_debug(f"saved {len(self.program_registrations)} registrations to {self.file_path}")
