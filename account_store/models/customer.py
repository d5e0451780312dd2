"""Customer model."""

from dataclasses import dataclass


@dataclass
class Customer:
    """Account owner.

    A customer is owned by exactly one account and carries no reference
    back to it.
    """

    id: int = 0  # caller-assigned
    name: str = ""

    def duplicate(self) -> "Customer":
        """Return a new customer with the same field values."""
        return Customer(id=self.id, name=self.name)
