"""Configuration management for ledger-sim."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ledger_sim.exceptions import ConfigurationError


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class EventConfig:
    """Ledger event publication configuration."""

    enabled: bool = False
    sink: str = "console"  # console, kafka
    topic_prefix: str = "dev.ledger"

    @property
    def topic(self) -> str:
        """Topic that receives ledger entry events."""
        return f"{self.topic_prefix}.ledger-entries"


@dataclass
class LedgerConfig:
    """Main configuration for ledger-sim."""

    account_id_prefix: str = "ACC"
    amount_places: int = 2
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    events: EventConfig = field(default_factory=EventConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if not self.account_id_prefix:
            raise ConfigurationError("account_id_prefix must not be empty")
        if self.amount_places < 0:
            raise ConfigurationError("amount_places must be >= 0")
        if self.events.sink not in ("console", "kafka"):
            raise ConfigurationError(f"Unknown event sink: {self.events.sink}")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        events = EventConfig(
            enabled=os.getenv("LEDGER_EVENTS", "false").lower() == "true",
            sink=os.getenv("EVENT_SINK", "console"),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.ledger"),
        )

        return cls(
            account_id_prefix=os.getenv("LEDGER_ACCOUNT_PREFIX", "ACC"),
            amount_places=_env_int("LEDGER_AMOUNT_PLACES", 2),
            kafka=kafka,
            output=output,
            events=events,
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
