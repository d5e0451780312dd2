"""Account model."""

from dataclasses import dataclass

from account_store.exceptions import DuplicationError
from account_store.models.customer import Customer
from account_store.models.enums import AccountStatus, AccountType


@dataclass
class Account:
    """Bank account record.

    ``account_id`` is issued by the repository when the account is saved;
    ``0`` marks an account that has never been saved. Balance and currency
    are stored as given, without validation.
    """

    account_id: int = 0
    balance: float = 0.0
    currency: str = ""
    account_type: AccountType | None = None
    account_status: AccountStatus | None = None
    customer: Customer | None = None

    def duplicate(self) -> "Account":
        """Return an independent copy of this account.

        Scalar fields are copied by value and the owned customer is
        duplicated, so the copy never shares its ``Customer`` instance with
        the original. The identity is kept as is.

        Raises
        ------
        DuplicationError
            If the owned customer cannot be duplicated.
        """
        customer = None
        if self.customer is not None:
            try:
                customer = self.customer.duplicate()
            except Exception as exc:
                raise DuplicationError(
                    f"Cannot duplicate customer of account {self.account_id}"
                ) from exc

        return Account(
            account_id=self.account_id,
            balance=self.balance,
            currency=self.currency,
            account_type=self.account_type,
            account_status=self.account_status,
            customer=customer,
        )
