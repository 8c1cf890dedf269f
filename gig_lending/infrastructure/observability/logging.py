"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from gig_lending.config import settings


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


def log_loan_originated(
    request_id: str,
    borrower: str,
    loan_id: int,
    amount: int,
    interest_rate: int,
    credit_score: int,
    duration_ms: float,
) -> None:
    """Log structured origination outcome"""
    logging.info(
        "Loan originated",
        extra={
            "request_id": request_id,
            "borrower": borrower,
            "step": "loan_originated",
            "loan_id": loan_id,
            "amount": amount,
            "interest_rate_bps": interest_rate,
            "credit_score": credit_score,
            "duration_ms": duration_ms,
        },
    )


def log_liquidity_provided(request_id: str, provider: str, amount: int, total_liquidity: int) -> None:
    logging.info(
        "Liquidity provided",
        extra={
            "request_id": request_id,
            "provider": provider,
            "step": "liquidity_provided",
            "amount": amount,
            "total_liquidity": total_liquidity,
        },
    )


def log_profile_updated(request_id: str, user: str, credit_score: int, platform_count: int) -> None:
    logging.info(
        "Credit profile updated",
        extra={
            "request_id": request_id,
            "user": user,
            "step": "profile_updated",
            "credit_score": credit_score,
            "platform_count": platform_count,
        },
    )


def log_rejection(request_id: str, step: str, error: Exception) -> None:
    """Log a protocol call aborted by a failed precondition"""
    logging.warning(
        f"Rejected: {error}",
        extra={
            "request_id": request_id,
            "step": step,
            "reason": type(error).__name__,
        },
    )
