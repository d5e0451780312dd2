"""Thread-safe in-memory account repository."""

import threading
from collections import Counter
from typing import Any, Callable

from account_store.logging import get_logger
from account_store.models import Account

logger = get_logger(__name__)

AccountPredicate = Callable[[Account], bool]


def _log_extra(account_id: int) -> dict[str, Any]:
    # JsonFormatter merges record.extra into the output
    return {"extra": {"account_id": account_id}}


class AccountRepository:
    """In-memory store of accounts keyed by their identity.

    Identities are issued by :meth:`save`, starting at 1 and increasing by
    one per save. A single lock guards both the identity counter and the
    map, and ``save`` holds it across issuing and inserting, so an issued
    identity is always retrievable by the time any other caller can see it.

    Accounts are stored by reference: ``find_by_id`` returns the same object
    that was saved.
    """

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, account: Account) -> Account:
        """Assign a fresh identity to ``account`` and store it.

        Any identity already set on the account is overwritten.
        """
        with self._lock:
            self._last_id += 1
            account.account_id = self._last_id
            self._accounts[account.account_id] = account
        logger.debug(
            "Saved account %d", account.account_id, extra=_log_extra(account.account_id)
        )
        return account

    def find_all(self) -> list[Account]:
        """Return a snapshot of all stored accounts, in no particular order."""
        with self._lock:
            return list(self._accounts.values())

    def find_by_id(self, account_id: int) -> Account | None:
        """Return the account stored under ``account_id``, or ``None``."""
        with self._lock:
            return self._accounts.get(account_id)

    def search(self, predicate: AccountPredicate) -> list[Account]:
        """Return the stored accounts for which ``predicate`` is true.

        The predicate is evaluated against a snapshot outside the lock, so it
        may call back into the repository.
        """
        return [account for account in self.find_all() if predicate(account)]

    def update(self, account: Account) -> Account:
        """Store ``account`` under its own identity, replacing any entry.

        No existence check is made: an account whose identity is not stored
        yet is inserted. Identities are not reserved by ``update``, so an
        account inserted under an identity the counter has not reached yet
        is replaced when a later ``save`` issues that identity.
        """
        with self._lock:
            replaced = account.account_id in self._accounts
            self._accounts[account.account_id] = account
        logger.debug(
            "%s account %d",
            "Replaced" if replaced else "Inserted",
            account.account_id,
            extra=_log_extra(account.account_id),
        )
        return account

    def delete_by_id(self, account_id: int) -> None:
        """Remove the account stored under ``account_id`` if there is one."""
        with self._lock:
            removed = self._accounts.pop(account_id, None)
        if removed is not None:
            logger.debug("Deleted account %d", account_id, extra=_log_extra(account_id))

    def count(self) -> int:
        """Return the number of stored accounts."""
        with self._lock:
            return len(self._accounts)

    def __len__(self) -> int:
        return self.count()

    def summary(self) -> dict[str, Any]:
        """Return counts of stored accounts, overall and by type and status."""
        accounts = self.find_all()
        by_type = Counter(a.account_type.value for a in accounts if a.account_type)
        by_status = Counter(a.account_status.value for a in accounts if a.account_status)
        return {
            "accounts": len(accounts),
            "by_type": dict(by_type),
            "by_status": dict(by_status),
        }
