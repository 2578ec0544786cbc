#!/usr/bin/env python3
"""Run the interactive banking menu over an in-memory ledger.

Optionally pre-fills the ledger with synthetic customers and activity, and
publishes every ledger entry to the console or to Kafka.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_sim.config import LedgerConfig
from ledger_sim.exceptions import SinkError
from ledger_sim.logging import get_logger, setup_logging
from ledger_sim.scenarios import DemoLedgerScenario
from ledger_sim.services import BankingService
from ledger_sim.shell import BankShell
from ledger_sim.sinks import ConsoleSink, JsonFileSink, KafkaSink

logger = get_logger(__name__)


def build_event_sink(config: LedgerConfig) -> ConsoleSink | KafkaSink | None:
    """Create the ledger event sink selected in ``config``."""
    if not config.events.enabled:
        return None
    if config.events.sink == "kafka":
        return KafkaSink(config.kafka)
    return ConsoleSink(pretty=False)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="In-memory banking ledger shell")
    parser.add_argument(
        "--demo-customers",
        type=int,
        default=0,
        help="Pre-fill the ledger with this many synthetic customers (default: 0)",
    )
    parser.add_argument(
        "--operations-per-account",
        type=int,
        default=5,
        help="Synthetic operations per demo account (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible demo data",
    )
    parser.add_argument(
        "--events",
        choices=["none", "console", "kafka"],
        default=None,
        help="Publish ledger entries as events (default: from LEDGER_EVENTS/EVENT_SINK)",
    )
    parser.add_argument(
        "--kafka-bootstrap",
        type=str,
        default=None,
        help="Kafka bootstrap servers",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the Export command (default: from OUTPUT_DIR)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: from LOG_LEVEL)",
    )
    args = parser.parse_args()

    config = LedgerConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.events is not None:
        config.events.enabled = args.events != "none"
        if config.events.enabled:
            config.events.sink = args.events
    if args.kafka_bootstrap:
        config.kafka.bootstrap_servers = args.kafka_bootstrap
    if args.output_dir is not None:
        config.output.json_output_dir = args.output_dir
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level, config.log_format)

    event_sink = build_event_sink(config)
    service = BankingService(config=config, event_sink=event_sink)

    if args.demo_customers > 0:
        scenario = DemoLedgerScenario(
            num_customers=args.demo_customers,
            operations_per_account=args.operations_per_account,
            seed=config.seed,
            service=service,
        )
        scenario.generate()

    export_sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    try:
        BankShell(service, export_sink=export_sink).run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        if event_sink is not None:
            try:
                event_sink.close()
            except SinkError as exc:
                logger.error("Closing event sink failed: %s", exc)


if __name__ == "__main__":
    main()
