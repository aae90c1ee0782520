"""Tests for serial and nickname validators."""

import pytest

from devnames.core.validation import is_valid_name, is_valid_serial


class TestIsValidSerial:
    """Tests for is_valid_serial."""

    @pytest.mark.parametrize(
        "serial",
        [
            "HT4BVWV00023",
            "emulator-5554",
            "usb:3-3.4.2",
            "product:volantisg",
            "model:Nexus_9",
            "192.168.1.20:5555",
        ],
    )
    def test_accepts_serials_and_qualifiers(self, serial: str) -> None:
        """Bare serials and qualifier forms are accepted."""
        assert is_valid_serial(serial)

    @pytest.mark.parametrize("serial", ["", " ", "HT4B VWV", "a/b", "dev*", "tab\n"])
    def test_rejects_malformed(self, serial: str) -> None:
        """Empty strings, whitespace and special characters are rejected."""
        assert not is_valid_serial(serial)


class TestIsValidName:
    """Tests for is_valid_name."""

    @pytest.mark.parametrize("name", ["MyTablet", "phone2", "work_phone", "X"])
    def test_accepts_word_characters(self, name: str) -> None:
        """Letters, digits and underscores are accepted."""
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name", ["", "My Tablet", "my-tablet", "usb:3-3", "tab.1", "télé", "a\n"]
    )
    def test_rejects_special_characters(self, name: str) -> None:
        """Whitespace, punctuation and non-ASCII letters are rejected."""
        assert not is_valid_name(name)

    def test_serial_can_also_be_a_name(self) -> None:
        """A plain alphanumeric serial satisfies both validators."""
        assert is_valid_name("HT4BVWV00023")
        assert is_valid_serial("HT4BVWV00023")
