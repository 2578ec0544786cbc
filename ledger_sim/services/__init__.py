"""Service layer of the ledger simulator."""

from ledger_sim.services.banking import BankingService

__all__ = ["BankingService"]
