"""Kafka sink for publishing ledger events."""

import json
import logging
import time
from dataclasses import dataclass, is_dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from ledger_sim.config import KafkaConfig
from ledger_sim.exceptions import SinkError
from ledger_sim.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0

    @property
    def throughput(self) -> float:
        """Calculate events per second achieved."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        duration = self.end_time - self.start_time
        return self.sent / duration if duration > 0 else 0.0


class KafkaSink:
    """Output records to Kafka topics as JSON.

    Messages are keyed by account so that all events of one account land on
    the same partition and keep their order.
    """

    KEY_FIELDS = ("subject", "account_id")

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = self._create_producer()
        self.stats = ProducerStats()

    def _create_producer(self) -> Producer:
        """Create Kafka producer with configuration."""
        return Producer(self.config.to_dict())

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def _get_key(self, record: Any) -> str | None:
        """Extract the message key from a record."""
        for key_field in self.KEY_FIELDS:
            if is_dataclass(record):
                value = getattr(record, key_field, None)
            elif isinstance(record, dict):
                value = record.get(key_field)
            else:
                value = None
            if value:
                return str(value)
        return None

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single record to a Kafka topic."""
        value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(record)

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as exc:
            raise SinkError(f"Cannot produce to {topic}: {exc}") from exc

        if self.stats.start_time is None:
            self.stats.start_time = time.time()
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic."""
        logger.debug("Writing batch to %s: %d records", topic, len(records))

        for record in records:
            self.send(topic, record)

        self.flush()
        self.stats.end_time = time.time()

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages.

        Raises
        ------
        SinkError
            If the producer fails or messages are still queued after
            ``timeout`` seconds.
        """
        try:
            remaining = self.producer.flush(timeout)
        except KafkaException as exc:
            raise SinkError(f"Cannot flush producer: {exc}") from exc
        if remaining:
            raise SinkError(f"{remaining} messages still queued after {timeout}s")

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d (%.1f%% delivered, %.1f events/s)",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
            self.stats.success_rate * 100,
            self.stats.throughput,
        )
