"""CLI test fixtures."""

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from gostats.config import loader
from gostats.core.logging import clear_run_id


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Ignore the user's global config and env, and undo logging setup afterwards."""
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml")
    for key in list(os.environ):
        if key.upper().startswith("GOSTATS__"):
            monkeypatch.delenv(key)
    yield
    logging.getLogger().handlers.clear()
    clear_run_id()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    return path
