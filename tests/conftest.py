"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from devnames.registry.names import NameRegistry
from devnames.registry.storage import CONFIG_ENV_VAR, ConfigStore


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real user config file."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("DEVNAMES_LOG_LEVEL", raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Path of a config file that does not exist yet."""
    return temp_dir / "devnames" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """ConfigStore writing to the temporary config path."""
    return ConfigStore(config_path)


@pytest.fixture
def registry(store: ConfigStore) -> NameRegistry:
    """NameRegistry on an empty temporary config."""
    return NameRegistry(store)


@pytest.fixture
def write_config(config_path: Path):
    """Write a raw config document to the temporary config path."""

    def _write(data: dict) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data))
        return config_path

    return _write
