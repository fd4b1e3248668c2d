"""Structured logging for batch dispatches."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_batch_dispatched(
    *,
    loader: str,
    batch_size: int,
    failed_keys: int,
    latency_ms: float | None = None,
) -> None:
    """Log a batch whose load function returned.

    Args:
        loader: Loader name
        batch_size: Number of keys in the batch
        failed_keys: Keys that resolved to an exception
        latency_ms: Time spent in the load function
    """
    logger.debug(
        "batch_dispatched",
        extra={
            "loader": loader,
            "batch_size": batch_size,
            "failed_keys": failed_keys,
            "latency_ms": latency_ms,
        },
    )


def log_batch_error(
    *,
    loader: str,
    batch_size: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a batch whose load function raised; every key in it is rejected."""
    logger.error(
        "batch_error",
        extra={
            "loader": loader,
            "batch_size": batch_size,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
