"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from truecost.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(request_id: str, calculator: str, duration_ms: float, **fields: Any) -> None:
    """Log a calculator run with its headline numbers"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "step": "calculation_complete",
            "calculator": calculator,
            "duration_ms": duration_ms,
            **fields,
        },
    )


def log_non_convergent_payoff(request_id: str, balance: float, months: int) -> None:
    """Payment plan never clears the balance within the simulation cap"""
    logging.warning(
        "Payoff simulation hit month cap",
        extra={
            "request_id": request_id,
            "step": "payoff_capped",
            "balance": balance,
            "months": months,
        },
    )
