"""Account generator."""

from typing import Iterator

from account_store.generators.base import BaseGenerator
from account_store.generators.customer import CustomerGenerator
from account_store.models import Account, AccountStatus, AccountType, Customer, account_builder


class AccountGenerator(BaseGenerator):
    """Generate unsaved accounts through the account builder.

    Requested statuses are drawn at random, so the builder's status rule
    decides what savings accounts end up with. Generated accounts have
    identity ``0`` until saved.
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.6, 0.4]

    ACCOUNT_STATUSES = list(AccountStatus)
    ACCOUNT_STATUS_WEIGHTS = [0.2, 0.6, 0.1, 0.1]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        customer_generator: CustomerGenerator | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.customers = customer_generator or CustomerGenerator(seed=seed, locale=locale)

    def generate(self, customer: Customer | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        customer : Customer | None
            Owner of the account. A new customer is generated when omitted.

        Returns
        -------
        Account
            Unsaved account.
        """
        account_type = self.random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]
        status = self.random.choices(
            self.ACCOUNT_STATUSES, weights=self.ACCOUNT_STATUS_WEIGHTS, k=1
        )[0]
        balance = round(self.random.uniform(-500.0, 50_000.0), 2)

        return (
            account_builder()
            .set_type(account_type)
            .set_status(status)
            .set_balance(balance)
            .set_currency(self.fake.currency_code())
            .set_customer(customer or self.customers.generate())
            .build()
        )

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Yield ``count`` accounts, each with its own new customer."""
        for _ in range(count):
            yield self.generate()
