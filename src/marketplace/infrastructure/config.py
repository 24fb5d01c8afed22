"""Runtime settings, read from the environment.

``MARKETPLACE_DATA_DIR`` points at the directory holding the JSON
collections; the CLI's ``--data-dir`` overrides it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "WARNING"
    log_format: str = "console"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.environ.get("MARKETPLACE_DATA_DIR", _DEFAULT_DATA_DIR)),
            log_level=os.environ.get("MARKETPLACE_LOG_LEVEL", "WARNING").upper(),
            log_format=os.environ.get("MARKETPLACE_LOG_FORMAT", "console").lower(),
        )

    def with_data_dir(self, data_dir: Path | None) -> Settings:
        if data_dir is None:
            return self
        return replace(self, data_dir=data_dir)
