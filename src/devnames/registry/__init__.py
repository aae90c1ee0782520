"""
devnames Registry Module.

Provides the nickname registry and the config file it is stored in.
"""

__all__ = [
    "ConfigStore",
    "DeviceConfig",
    "NameEntry",
    "NameOperation",
    "NameRegistry",
    "NameResult",
    "default_config_path",
    "duplicate_serials",
    "ensure_one_to_one",
    "reverse_map",
]

from devnames.registry.names import (
    NameEntry,
    NameOperation,
    NameRegistry,
    NameResult,
    duplicate_serials,
    ensure_one_to_one,
    reverse_map,
)
from devnames.registry.storage import ConfigStore, DeviceConfig, default_config_path
