"""Validators for device serials and nicknames."""

import re

# Bare serials (HT4BVWV00023) and qualifier forms (usb:3-3.4.2, product:volantisg).
SERIAL_PATTERN = re.compile(r"[A-Za-z0-9:._\-]+")
NAME_PATTERN = re.compile(r"\w+", re.ASCII)


def is_valid_serial(serial: str) -> bool:
    """Check whether the string looks like a device serial or qualifier."""
    return bool(serial) and SERIAL_PATTERN.fullmatch(serial) is not None


def is_valid_name(name: str) -> bool:
    """Check whether the string is a usable nickname (letters, digits, underscore)."""
    return bool(name) and NAME_PATTERN.fullmatch(name) is not None
