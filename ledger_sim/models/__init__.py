"""Domain models for the ledger simulator."""

from ledger_sim.models.base import Event

__all__ = ["Event"]
