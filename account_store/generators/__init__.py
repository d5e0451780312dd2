"""Sample data generators."""

from account_store.generators.account import AccountGenerator
from account_store.generators.customer import CustomerGenerator

__all__ = ["AccountGenerator", "CustomerGenerator"]
