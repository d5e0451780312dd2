"""In-memory bank account record store."""

from account_store.models import (
    Account,
    AccountBuilder,
    AccountStatus,
    AccountType,
    Customer,
    account_builder,
)
from account_store.store import AccountRepository, get_repository

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountBuilder",
    "AccountRepository",
    "AccountStatus",
    "AccountType",
    "Customer",
    "__version__",
    "account_builder",
    "get_repository",
]
