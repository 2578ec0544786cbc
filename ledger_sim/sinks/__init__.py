"""Output sinks for ledger events and exports."""

from ledger_sim.sinks.console import ConsoleSink
from ledger_sim.sinks.json_file import JsonFileSink
from ledger_sim.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
