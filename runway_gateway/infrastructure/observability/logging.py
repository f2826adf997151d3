"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from runway_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping every record with time, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on stdout"""
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_forecast(
    request_id: str,
    status: str,
    runway_days: int,
    risk_score: int,
    duration_ms: float,
) -> None:
    """Log structured forecast outcome"""
    logging.info(
        "Forecast completed",
        extra={
            "request_id": request_id,
            "step": "forecast_complete",
            "status": status,
            "runway_days": runway_days,
            "risk_score": risk_score,
            "duration_ms": duration_ms,
        },
    )


def log_scenario(
    request_id: str,
    cost: float,
    days_lost: int,
    risk_level: str,
    duration_ms: float,
) -> None:
    """Log structured what-if outcome"""
    logging.info(
        "Scenario completed",
        extra={
            "request_id": request_id,
            "step": "scenario_complete",
            "cost": cost,
            "days_lost": days_lost,
            "risk_level": risk_level,
            "duration_ms": duration_ms,
        },
    )
