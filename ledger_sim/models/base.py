"""Base models shared across domains."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Standard event envelope for streaming."""

    event_id: str
    event_type: str  # entity.action (e.g., ledger.deposit)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)
