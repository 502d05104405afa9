"""Shared pytest fixtures for mediakit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mediakit.format.media_type import MediaType


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    monkeypatch.setenv("MEDIAKIT_DATA_DIR", str(data_dir))
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / ".env"))
    monkeypatch.delenv("MEDIAKIT_LOG_LEVEL", raising=False)
    return data_dir


@pytest.fixture()
def data_dir(_isolate_data_dir: Path) -> Path:
    return _isolate_data_dir


@pytest.fixture()
def parse():
    """``MediaType.parse`` that fails the test instead of returning ``None``."""

    def _parse(raw: str) -> MediaType:
        media_type = MediaType.parse(raw)
        assert media_type is not None, f"{raw!r} should parse"
        return media_type

    return _parse
