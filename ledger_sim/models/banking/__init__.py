"""Banking domain models."""

from ledger_sim.models.banking.account import Account
from ledger_sim.models.banking.customer import Customer
from ledger_sim.models.banking.enums import AccountType, EntryKind
from ledger_sim.models.banking.ledger_entry import LedgerEntry

__all__ = [
    "Account",
    "AccountType",
    "Customer",
    "EntryKind",
    "LedgerEntry",
]
