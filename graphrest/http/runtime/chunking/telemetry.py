"""Structured logging for chunking operations.

This module provides telemetry hooks for chunked bulk loads, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    endpoint_id: str,
    total_chunks: int,
    total_keys: int,
    chunk_size: int,
) -> None:
    """Log chunk plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_chunks: Total number of chunks planned
        total_keys: Number of lookup keys being planned
        chunk_size: Maximum keys per chunk
    """
    logger.debug(
        "chunk_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_chunks": total_chunks,
            "total_keys": total_keys,
            "chunk_size": chunk_size,
        },
    )


def log_chunk_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    keys: int,
    items_returned: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk
        keys: Number of keys in the chunk
        items_returned: Number of non-null items the backend returned
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "chunk_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "keys": keys,
            "items_returned": items_returned,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    endpoint_id: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution.

    Args:
        endpoint_id: Endpoint identifier
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "chunks_used": result.chunks_used,
            "chunks_failed": result.chunks_failed,
            "total_items": result.total_items,
            "dropped_items": result.dropped_items,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "HttpError", "TransportError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
