"""Application settings -- reads from the ``.env`` file and environment.

Settings only affect the command-line tool (logging, history location);
parsing, matching and classification never consult them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from ..util.env_file import EnvFile

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


class Settings:
    """Runtime configuration sourced from ``.env`` and environment variables."""

    _DATA_DIR_ENV: ClassVar[str] = "MEDIAKIT_DATA_DIR"

    def __init__(self) -> None:
        # Resolve .env path: explicit DOTENV_PATH > data_dir/.env > CWD/.env
        dotenv = os.getenv("DOTENV_PATH")
        if not dotenv:
            data_dir = os.getenv(self._DATA_DIR_ENV)
            if data_dir:
                dotenv = str(Path(data_dir) / ".env")
            else:
                dotenv = ".env"
        self.env = EnvFile(dotenv)
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        e = self._read

        level = (e("MEDIAKIT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown MEDIAKIT_LOG_LEVEL %r; using %s", level, DEFAULT_LOG_LEVEL)
            level = DEFAULT_LOG_LEVEL
        self.log_level: str = level

        raw_dir = e(self._DATA_DIR_ENV)
        self.data_dir: Path = Path(raw_dir).expanduser() if raw_dir else Path.home() / ".mediakit"

    # -- derived paths -----------------------------------------------------

    @property
    def history_path(self) -> Path:
        return self.data_dir / ".cli_history"

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return self.env.read(key) or os.getenv(key, "")

    def ensure_dirs(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Module-level instance
cfg = Settings()
