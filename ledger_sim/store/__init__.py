"""In-memory stores for ledger state."""

from ledger_sim.store.accounts import AccountRepository

__all__ = ["AccountRepository"]
