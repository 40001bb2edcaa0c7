"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from tender_crm.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_request_update(
    request_id: str,
    financial_request_id: str,
    status: str,
    actor_id: str,
    duration_ms: float,
) -> None:
    """Log a financial request status change"""
    logging.getLogger("tender_crm.ledger").info(
        "Financial request updated",
        extra={
            "request_id": request_id,
            "financial_request_id": financial_request_id,
            "step": "ledger_update",
            "status": status,
            "actor_id": actor_id,
            "duration_ms": duration_ms,
        },
    )


def log_projection(
    financial_request_id: str,
    tender_id: str,
    slot: str | None,
    outcome: str,
) -> None:
    """Log the outcome of projecting an instrument onto a tender"""
    logger = logging.getLogger("tender_crm.projection")
    level = logging.WARNING if outcome == "tender_missing" else logging.INFO
    logger.log(
        level,
        "Instrument projection %s",
        outcome,
        extra={
            "financial_request_id": financial_request_id,
            "tender_id": tender_id,
            "step": "projection",
            "slot": slot,
            "outcome": outcome,
        },
    )
