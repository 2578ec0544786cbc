"""Scenarios for generating demo ledgers."""

from ledger_sim.scenarios.demo import DemoLedgerScenario

__all__ = ["DemoLedgerScenario"]
