"""
Nickname Registry - set, unset, list and clear device nicknames.

Every operation is a single load -> mutate -> save transaction against a
ConfigStore; nothing is kept in memory between calls. The nickname ->
serial mapping must stay one-to-one: a serial carries at most one nickname.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from devnames.core.exceptions import (
    NicknameInUseError,
    NicknameNotFoundError,
    RegistryIntegrityError,
    UsageError,
)
from devnames.core.validation import is_valid_name, is_valid_serial
from devnames.registry.storage import ConfigStore, DeviceConfig

logger = logging.getLogger(__name__)


class NameOperation(Enum):
    """Mutating operations on the nickname registry."""

    SET = "set"
    UNSET = "unset"
    CLEAR_ALL = "clear-all"


@dataclass(frozen=True)
class NameEntry:
    """A single serial/nickname pair."""

    serial: str
    nickname: str


@dataclass
class NameResult:
    """Result of a mutating registry operation."""

    operation: NameOperation
    serial: str = ""
    nickname: str = ""
    replaced: str | None = None  # nickname displaced by SET
    removed: int = 0


def reverse_map(names: dict[str, str]) -> dict[str, str]:
    """
    Build the serial -> nickname index of a nickname -> serial mapping.

    The mapping is assumed to be one-to-one; with duplicates the last
    nickname seen wins.
    """
    return {serial: nickname for nickname, serial in names.items()}


def duplicate_serials(names: dict[str, str]) -> dict[str, list[str]]:
    """Return serials that carry more than one nickname, with their nicknames."""
    by_serial: dict[str, list[str]] = {}
    for nickname, serial in names.items():
        by_serial.setdefault(serial, []).append(nickname)
    return {
        serial: sorted(nicknames)
        for serial, nicknames in by_serial.items()
        if len(nicknames) > 1
    }


def ensure_one_to_one(names: dict[str, str]) -> None:
    """
    Check that no serial has more than one nickname.

    Raises:
        RegistryIntegrityError: If the mapping is not one-to-one
    """
    duplicates = duplicate_serials(names)
    if duplicates:
        raise RegistryIntegrityError(duplicates=duplicates)


class NameRegistry:
    """
    Device nickname registry backed by a ConfigStore.

    Usage:
        registry = NameRegistry(ConfigStore())
        registry.set_name("HT4BVWV00023", "MyTablet")
        registry.resolve("MyTablet")  # "HT4BVWV00023"
    """

    def __init__(self, store: ConfigStore):
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    def _load(self) -> DeviceConfig:
        config = self._store.load()
        duplicates = duplicate_serials(config.names)
        if duplicates:
            logger.warning(
                "Config %s maps serials to several nicknames: %s",
                self._store.path,
                duplicates,
            )
        return config

    def set_name(self, serial: str, nickname: str) -> NameResult:
        """
        Assign a nickname to a device serial.

        An existing nickname of the same serial is replaced. A nickname that
        is already assigned is never reassigned, even to the same serial.

        Raises:
            UsageError: If the serial or nickname is malformed
            NicknameInUseError: If the nickname is already assigned
        """
        if not is_valid_serial(serial):
            raise UsageError(
                f"Not a valid device serial: {serial}",
                argument="device_serial",
                value=serial,
            )
        if not is_valid_name(nickname):
            raise UsageError(
                f"Not a valid nickname: {nickname}",
                argument="nickname",
                value=nickname,
            )

        config = self._load()

        if nickname in config.names:
            raise NicknameInUseError(
                f"The provided nickname {nickname!r} is already in use.",
                nickname=nickname,
                serial=config.names[nickname],
            )

        replaced = reverse_map(config.names).get(serial)
        if replaced is not None:
            del config.names[replaced]
            logger.info("Replacing nickname %r of %s", replaced, serial)

        config.names[nickname] = serial
        ensure_one_to_one(config.names)
        self._store.save(config)

        logger.info("Set nickname %r for %s", nickname, serial)
        return NameResult(
            operation=NameOperation.SET,
            serial=serial,
            nickname=nickname,
            replaced=replaced,
        )

    def unset_name(self, identifier: str) -> NameResult:
        """
        Remove a nickname, given either the nickname or the device serial.

        Raises:
            UsageError: If the identifier is neither a valid serial nor a valid nickname
            NicknameNotFoundError: If no entry matches
        """
        if not is_valid_serial(identifier) and not is_valid_name(identifier):
            raise UsageError(
                f"Not a valid device serial or nickname: {identifier}",
                argument="identifier",
                value=identifier,
            )

        config = self._load()

        # A nickname match wins over a serial match of another entry.
        if identifier in config.names:
            nickname = identifier
        else:
            nickname = reverse_map(config.names).get(identifier)
        if nickname is None:
            raise NicknameNotFoundError(
                "The provided argument is neither a known nickname nor a device serial.",
                identifier=identifier,
            )

        serial = config.names[nickname]

        del config.names[nickname]
        self._store.save(config)

        logger.info("Unset nickname %r for %s", nickname, serial)
        return NameResult(
            operation=NameOperation.UNSET,
            serial=serial,
            nickname=nickname,
            removed=1,
        )

    def list_names(self) -> list[NameEntry]:
        """List all nicknames, sorted by device serial."""
        config = self._load()
        entries = [
            NameEntry(serial=serial, nickname=nickname)
            for nickname, serial in config.names.items()
        ]
        return sorted(entries, key=lambda entry: (entry.serial, entry.nickname))

    def clear_all(self) -> NameResult:
        """Remove every nickname, keeping the rest of the config file."""
        config = self._load()
        removed = len(config.names)
        config.names = {}
        self._store.save(config)

        logger.info("Cleared %d nicknames", removed)
        return NameResult(operation=NameOperation.CLEAR_ALL, removed=removed)

    def resolve(self, identifier: str) -> str:
        """
        Turn a nickname or device serial into a device serial.

        Known nicknames resolve to their serial; anything else that is a
        valid serial is returned unchanged.

        Raises:
            NicknameNotFoundError: If the identifier is neither
        """
        config = self._load()
        if identifier in config.names:
            return config.names[identifier]
        if is_valid_serial(identifier):
            return identifier
        raise NicknameNotFoundError(
            f"Unknown device nickname: {identifier}",
            identifier=identifier,
        )
