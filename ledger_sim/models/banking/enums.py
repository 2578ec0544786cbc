"""Enumeration types for banking domain entities."""

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class EntryKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"

    @property
    def is_transfer(self) -> bool:
        return self in (EntryKind.TRANSFER_OUT, EntryKind.TRANSFER_IN)
