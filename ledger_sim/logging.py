"""Logging setup for ledger-sim.

Ledger code attaches context to its records through ``extra``::

    logger.info("Rejected deposit", extra={"operation": "deposit", "error_kind": kind})

The JSON format emits those fields as top-level keys; the standard format
only shows the message.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Record attributes copied into JSON output when a log call supplies them
LEDGER_FIELDS = ("operation", "account_id", "counterparty", "amount", "error_kind")

QUIET_LOGGERS = ("confluent_kafka", "faker")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Configure the root logger for ledger-sim.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("ledger_sim").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying any ledger context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in LEDGER_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
