"""Tests for the devnames exception hierarchy."""

from devnames.core.exceptions import (
    DevNamesError,
    NicknameInUseError,
    NicknameNotFoundError,
    RegistryIntegrityError,
    StoreError,
    UsageError,
    format_exception,
)


class TestDevNamesError:
    """Tests for the base exception."""

    def test_str_without_details(self) -> None:
        """Message alone is rendered when there are no details."""
        assert str(DevNamesError("boom")) == "boom"

    def test_str_with_details(self) -> None:
        """Details are appended to the message."""
        error = DevNamesError("boom", details={"key": "value"})
        assert str(error) == "boom (key=value)"

    def test_to_dict(self) -> None:
        """to_dict carries type, message and details."""
        error = DevNamesError("boom", details={"key": "value"})
        assert error.to_dict() == {
            "error_type": "DevNamesError",
            "message": "boom",
            "details": {"key": "value"},
        }

    def test_subclasses(self) -> None:
        """All error kinds derive from DevNamesError."""
        for cls in (
            UsageError,
            NicknameInUseError,
            NicknameNotFoundError,
            RegistryIntegrityError,
            StoreError,
        ):
            assert issubclass(cls, DevNamesError)


class TestSpecificErrors:
    """Tests for the attributes of specific errors."""

    def test_usage_error(self) -> None:
        error = UsageError("Not a valid nickname: a b", argument="nickname", value="a b")
        assert error.argument == "nickname"
        assert error.value == "a b"
        assert str(error) == "Not a valid nickname: a b"

    def test_nickname_in_use(self) -> None:
        error = NicknameInUseError(nickname="tab", serial="S1")
        assert error.nickname == "tab"
        assert error.details == {"serial": "S1"}

    def test_not_found(self) -> None:
        error = NicknameNotFoundError(identifier="ghost")
        assert error.identifier == "ghost"
        assert error.details == {}

    def test_integrity_error(self) -> None:
        error = RegistryIntegrityError(duplicates={"S1": ["a", "b"]})
        assert error.duplicates == {"S1": ["a", "b"]}
        assert "S1" in str(error)

    def test_store_error(self) -> None:
        error = StoreError("bad", config_file="/tmp/c.json", operation="load")
        assert error.details == {"config_file": "/tmp/c.json", "operation": "load"}


class TestFormatException:
    """Tests for format_exception."""

    def test_devnames_error(self) -> None:
        assert format_exception(NicknameNotFoundError("gone")) == "gone"

    def test_foreign_error(self) -> None:
        assert format_exception(ValueError("nope")) == "ValueError: nope"
