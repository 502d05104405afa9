"""Read-only accessor for a ``.env`` file."""

from __future__ import annotations

from pathlib import Path

from dotenv import dotenv_values


class EnvFile:
    """Key/value lookups against a dotenv file that may not exist yet.

    The file is re-read on every call so edits made while the process runs
    are picked up by :meth:`Settings.reload`.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self, key: str) -> str:
        return self.read_all().get(key, "")

    def read_all(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        return {k: v for k, v in dotenv_values(self.path).items() if v is not None}
