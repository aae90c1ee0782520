"""
devnames Core Module.

Provides the exception hierarchy and the serial/nickname validators.
"""

__all__ = [
    "DevNamesError",
    "UsageError",
    "NicknameInUseError",
    "NicknameNotFoundError",
    "RegistryIntegrityError",
    "StoreError",
    "format_exception",
    "is_valid_name",
    "is_valid_serial",
]

from devnames.core.exceptions import (
    DevNamesError,
    NicknameInUseError,
    NicknameNotFoundError,
    RegistryIntegrityError,
    StoreError,
    UsageError,
    format_exception,
)
from devnames.core.validation import is_valid_name, is_valid_serial
