"""Pytest configuration and fixtures."""

import pytest

from account_store.models import Account, AccountStatus, AccountType, Customer
from account_store.store import AccountRepository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def repository() -> AccountRepository:
    """Fresh repository for each test."""
    return AccountRepository()


@pytest.fixture
def sample_customer() -> Customer:
    """Sample customer."""
    return Customer(id=7, name="Ada Lovelace")


@pytest.fixture
def sample_account(sample_customer: Customer) -> Account:
    """Unsaved savings account owned by the sample customer."""
    return Account(
        balance=100.0,
        currency="USD",
        account_type=AccountType.SAVINGS,
        account_status=AccountStatus.ACTIVATED,
        customer=sample_customer,
    )
