from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from dev_noindex.config import NoIndexConfig

_ENV_VARS = [
    "DEV_NOINDEX_ROOTS",
    "DEV_NOINDEX_EXTRA_NAMES",
    "DEV_NOINDEX_EDITOR_CACHES",
    "DEV_NOINDEX_BROWSER_CACHES",
    "DEV_NOINDEX_DOCKER_CACHES",
    "DEV_NOINDEX_ORBSTACK_CACHES",
    "DEV_NOINDEX_GLOBAL_CACHES",
    "DEV_NOINDEX_EVENT_LOG",
    "DEV_NOINDEX_REBUILD_TIMEOUT",
    "DEV_NOINDEX_LOG_LEVEL",
    "DEV_ROOTS",
    "EXTRA_NAMES",
    "INCLUDE_EDITORS",
    "INCLUDE_BROWSERS",
    "INCLUDE_DOCKER",
    "INCLUDE_ORBSTACK",
    "MARK_GLOBAL_CACHES",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def mock_log_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Keep the event log inside tmp_path for every test."""
    log_file = tmp_path / "state" / "events.jsonl"
    with patch("dev_noindex.event_log.LOG_PATH", log_file):
        yield log_file


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def dev_root(tmp_path: Path) -> Path:
    root = tmp_path / "devA"
    root.mkdir()
    return root


@pytest.fixture
def mock_config(home: Path, dev_root: Path) -> NoIndexConfig:
    return NoIndexConfig(roots=(dev_root,), home=home)
