"""Tests for custom exception hierarchy."""

from account_store.exceptions import AccountStoreError, ConfigurationError, DuplicationError


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_account_store_error_is_exception(self) -> None:
        assert isinstance(AccountStoreError("test"), Exception)

    def test_duplication_error_is_account_store_error(self) -> None:
        assert isinstance(DuplicationError("test"), AccountStoreError)

    def test_configuration_error_is_account_store_error(self) -> None:
        assert isinstance(ConfigurationError("test"), AccountStoreError)

    def test_exception_message(self) -> None:
        err = DuplicationError("Cannot duplicate customer of account 3")
        assert str(err) == "Cannot duplicate customer of account 3"
