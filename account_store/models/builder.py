"""Fluent construction of account records.

Setters only record values; the type/status rule is applied once, in
``build()``, over the complete set of values, so setters may be called in
any order::

    account = (
        account_builder()
        .set_balance(100.0)
        .set_currency("USD")
        .set_status(AccountStatus.BLOCKED)
        .set_type(AccountType.SAVINGS)
        .build()
    )
    account.account_status  # AccountStatus.ACTIVATED
"""

from __future__ import annotations

from dataclasses import dataclass

from account_store.logging import get_logger
from account_store.models.account import Account
from account_store.models.customer import Customer
from account_store.models.enums import AccountStatus, AccountType

logger = get_logger(__name__)


@dataclass
class AccountSpec:
    """Values collected by an :class:`AccountBuilder` before ``build()``."""

    account_id: int | None = None
    balance: float | None = None
    currency: str | None = None
    account_type: AccountType | None = None
    account_status: AccountStatus | None = None
    customer: Customer | None = None


def resolve_status(
    account_type: AccountType | None,
    requested: AccountStatus | None,
) -> AccountStatus | None:
    """Apply the status rule for a requested status.

    Only current accounts keep the requested status. Any other type,
    including an unset one, is forced to ``ACTIVATED``. When no status was
    requested there is nothing to resolve and ``None`` is returned.
    """
    if requested is None:
        return None
    if account_type == AccountType.CURRENT:
        return requested
    return AccountStatus.ACTIVATED


class AccountBuilder:
    """Chainable builder for :class:`Account`.

    Each setter returns the builder itself. Missing values fall back to the
    ``Account`` defaults; there is no completeness check. The builder can be
    reused, and every account it builds owns a separate customer.
    """

    def __init__(self) -> None:
        self._spec = AccountSpec()
        self._customer_taken = False

    def set_account_id(self, account_id: int) -> AccountBuilder:
        self._spec.account_id = account_id
        return self

    def set_balance(self, balance: float) -> AccountBuilder:
        self._spec.balance = balance
        return self

    def set_currency(self, currency: str) -> AccountBuilder:
        self._spec.currency = currency
        return self

    def set_type(self, account_type: AccountType) -> AccountBuilder:
        self._spec.account_type = account_type
        return self

    def set_status(self, status: AccountStatus) -> AccountBuilder:
        """Request a status; see :func:`resolve_status` for what is kept."""
        self._spec.account_status = status
        return self

    def set_customer(self, customer: Customer) -> AccountBuilder:
        """Set the owner; the next build takes this instance, later builds a copy."""
        self._spec.customer = customer
        self._customer_taken = False
        return self

    def build(self) -> Account:
        """Return a new account from the collected values."""
        spec = self._spec
        status = resolve_status(spec.account_type, spec.account_status)
        if spec.account_status is not None and status != spec.account_status:
            logger.debug(
                "Status %s replaced by %s for account type %s",
                spec.account_status.value,
                status.value,
                spec.account_type.value if spec.account_type else None,
            )

        account = Account(account_type=spec.account_type, account_status=status)
        if spec.account_id is not None:
            account.account_id = spec.account_id
        if spec.balance is not None:
            account.balance = spec.balance
        if spec.currency is not None:
            account.currency = spec.currency
        if spec.customer is not None:
            if self._customer_taken:
                account.customer = spec.customer.duplicate()
            else:
                account.customer = spec.customer
                self._customer_taken = True
        return account


def account_builder() -> AccountBuilder:
    """Return a fresh :class:`AccountBuilder`."""
    return AccountBuilder()
