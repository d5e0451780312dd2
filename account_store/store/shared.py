"""Process-wide shared repository.

Applications that manage their own lifetime can construct an
:class:`AccountRepository` and pass it around; ``get_repository`` is for
code that wants the one instance shared by the whole process.
"""

import threading

from account_store.logging import get_logger
from account_store.store.repository import AccountRepository

logger = get_logger(__name__)

_repository: AccountRepository | None = None
_repository_lock = threading.Lock()


def get_repository() -> AccountRepository:
    """Return the shared repository, creating it on first call."""
    global _repository
    if _repository is None:
        with _repository_lock:
            if _repository is None:
                _repository = AccountRepository()
                logger.info("Created shared account repository")
    return _repository
