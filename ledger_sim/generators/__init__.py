"""Demo data generators."""

from ledger_sim.generators.activity import ActivityGenerator, Operation, OperationType
from ledger_sim.generators.customer import CustomerGenerator

__all__ = ["ActivityGenerator", "CustomerGenerator", "Operation", "OperationType"]
