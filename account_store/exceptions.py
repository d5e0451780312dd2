"""Custom exception hierarchy for account-store."""


class AccountStoreError(Exception):
    """Base exception for all account-store errors."""


class DuplicationError(AccountStoreError):
    """Raised when an account or one of its owned records cannot be duplicated."""


class ConfigurationError(AccountStoreError):
    """Raised when configuration is invalid or missing."""
