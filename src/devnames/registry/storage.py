"""
Config Storage - the JSON file holding device nicknames.

The config document is a JSON object. The `names` key holds the
nickname -> serial mapping; any other top-level keys belong to other
tools and are written back untouched.

There is no cross-process locking. Two invocations writing the same file
at once race and the last writer wins.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from devnames.core.exceptions import StoreError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVNAMES_CONFIG"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> Path:
    """
    Resolve the config file location.

    Order: $DEVNAMES_CONFIG, then $XDG_CONFIG_HOME/devnames/config.json,
    then ~/.config/devnames/config.json.
    """
    explicit = os.getenv(CONFIG_ENV_VAR, "")
    if explicit:
        return Path(explicit).expanduser()

    xdg_home = os.getenv("XDG_CONFIG_HOME", "")
    base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
    return base / "devnames" / CONFIG_FILE_NAME


class DeviceConfig(BaseModel):
    """Persisted config document."""

    model_config = ConfigDict(extra="allow")

    names: dict[str, str] = Field(
        default_factory=dict, description="nickname -> device serial"
    )


class ConfigStore:
    """
    Reads and writes a DeviceConfig at a fixed path.

    A missing file loads as an empty config. Saves go through a sibling
    temp file and os.replace so a crash mid-write leaves the previous file
    intact.
    """

    def __init__(self, path: Path | None = None):
        """Initialize the store; defaults to default_config_path()."""
        self._path = Path(path) if path is not None else default_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DeviceConfig:
        """
        Load the config from disk.

        Raises:
            StoreError: If the file is unreadable or malformed
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Config file %s does not exist, using empty config", self._path)
            return DeviceConfig()
        except UnicodeDecodeError as e:
            raise StoreError(
                f"Config file is not valid UTF-8: {e.reason} at byte {e.start}",
                config_file=str(self._path),
                operation="load",
            ) from e
        except OSError as e:
            raise StoreError(
                f"Could not read config file: {e.strerror or e}",
                config_file=str(self._path),
                operation="load",
            ) from e

        if not raw.strip():
            return DeviceConfig()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(
                f"Config file is not valid JSON: {e.msg} at line {e.lineno}",
                config_file=str(self._path),
                operation="load",
            ) from e

        if not isinstance(data, dict):
            raise StoreError(
                "Config file must contain a JSON object",
                config_file=str(self._path),
                operation="load",
            )

        try:
            config = DeviceConfig.model_validate(data)
        except ValidationError as e:
            raise StoreError(
                f"Config file has an invalid layout ({e.error_count()} errors)",
                config_file=str(self._path),
                operation="load",
            ) from e

        logger.debug("Loaded %d nicknames from %s", len(config.names), self._path)
        return config

    def save(self, config: DeviceConfig) -> None:
        """
        Persist the config atomically using write-replace pattern.

        Raises:
            StoreError: If the file cannot be written
        """
        temp_path = self._path.with_name(f"{self._path.name}.tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(
                json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
            os.replace(temp_path, self._path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise StoreError(
                f"Could not write config file: {e.strerror or e}",
                config_file=str(self._path),
                operation="save",
            ) from e

        logger.debug("Saved %d nicknames to %s", len(config.names), self._path)
