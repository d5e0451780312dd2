"""Account record models."""

from account_store.models.account import Account
from account_store.models.builder import AccountBuilder, AccountSpec, account_builder
from account_store.models.customer import Customer
from account_store.models.enums import AccountStatus, AccountType

__all__ = [
    "Account",
    "AccountBuilder",
    "AccountSpec",
    "AccountStatus",
    "AccountType",
    "Customer",
    "account_builder",
]
