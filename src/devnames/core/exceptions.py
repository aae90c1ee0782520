"""
devnames Exception Hierarchy.

Defines the errors raised by the nickname registry and its config store.
The CLI is the only place these are turned into exit codes.
"""

from typing import Any


class DevNamesError(Exception):
    """
    Base exception for all devnames errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a DevNamesError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UsageError(DevNamesError):
    """
    Raised when a command argument is malformed.

    Covers device serials and nicknames that fail validation. The CLI
    reports these together with the command usage.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
    ):
        """
        Initialize a UsageError.

        Args:
            message: Human-readable error message
            argument: Name of the offending argument
            value: The rejected value
        """
        super().__init__(message)
        self.argument = argument
        self.value = value


class NicknameInUseError(DevNamesError):
    """Raised when setting a nickname that is already assigned."""

    def __init__(
        self,
        message: str = "Nickname already in use",
        *,
        nickname: str | None = None,
        serial: str | None = None,
    ):
        details = {}
        if serial:
            details["serial"] = serial
        super().__init__(message, details=details)
        self.nickname = nickname
        self.serial = serial


class NicknameNotFoundError(DevNamesError):
    """Raised when an identifier matches neither a nickname nor a serial."""

    def __init__(
        self,
        message: str = "Neither a known nickname nor a device serial",
        *,
        identifier: str | None = None,
    ):
        super().__init__(message)
        self.identifier = identifier


class RegistryIntegrityError(DevNamesError):
    """
    Raised when the nickname mapping is not one-to-one.

    A serial may carry at most one nickname. This only happens when the
    config file was edited by hand.
    """

    def __init__(
        self,
        message: str = "Device serials with more than one nickname",
        *,
        duplicates: dict[str, list[str]] | None = None,
    ):
        duplicates = duplicates or {}
        details: dict[str, Any] = {}
        if duplicates:
            details["duplicates"] = duplicates
        super().__init__(message, details=details)
        self.duplicates = duplicates


class StoreError(DevNamesError):
    """
    Errors reading or writing the config file.

    Raised when:
    - The config file cannot be read or written
    - The config file is not valid JSON
    - The config document has the wrong shape
    """

    def __init__(
        self,
        message: str,
        *,
        config_file: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a StoreError.

        Args:
            message: Human-readable error message
            config_file: Path to the config file
            operation: "load" or "save"
            details: Optional structured data for debugging
        """
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.config_file = config_file
        self.operation = operation


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, DevNamesError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
