"""Customer generator."""

import itertools
from typing import Iterator

from account_store.generators.base import BaseGenerator
from account_store.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate customers with sequential ids and Faker names."""

    def __init__(self, seed: int | None = None, locale: str = "en_US", start_id: int = 1) -> None:
        super().__init__(seed, locale)
        self._ids = itertools.count(start_id)

    def generate(self) -> Customer:
        return Customer(id=next(self._ids), name=self.fake.name())

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Yield ``count`` customers."""
        for _ in range(count):
            yield self.generate()
