"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from wealthwatch.config import settings


class CustomJsonFormatter(JsonFormatter):
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


def log_health_assessment(
    request_id: str,
    score: int,
    risk_level: str,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log structured health score outcome"""
    logging.info(
        "Health assessment completed",
        extra={
            "request_id": request_id,
            "step": "health_assessment",
            "score": score,
            "risk_level": risk_level,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )


def log_record_change(request_id: str, entity: str, action: str, record_id: str) -> None:
    """Log a create/update/delete against the record store"""
    logging.info(
        f"{entity.capitalize()} {action}",
        extra={
            "request_id": request_id,
            "step": "record_change",
            "entity": entity,
            "action": action,
            "record_id": record_id,
        },
    )
