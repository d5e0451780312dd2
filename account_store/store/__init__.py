"""In-memory account storage."""

from account_store.store.repository import AccountPredicate, AccountRepository
from account_store.store.shared import get_repository

__all__ = ["AccountPredicate", "AccountRepository", "get_repository"]
