"""Enumeration types for account records."""

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class AccountStatus(str, Enum):
    CREATED = "CREATED"
    ACTIVATED = "ACTIVATED"
    BLOCKED = "BLOCKED"
    SUSPENDED = "SUSPENDED"
