"""Timing utilities for profiling management API calls."""

import time
from collections.abc import Generator
from contextlib import contextmanager

from auth0_management.core.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def timed(operation: str, slow_ms: float = 1000.0) -> Generator[None]:
    """Context manager for timing operations.

    Args:
        operation: Description of the operation being timed.
        slow_ms: Duration above which the operation is reported as slow.

    Usage:
        with timed("GET https://tenant.auth0.com/api/v2/users"):
            response = client.send(request)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms < slow_ms:
            logger.debug(f"[{duration_ms:.2f}ms] {operation}")
        else:
            logger.info(f"[{duration_ms:.2f}ms] {operation} (slow)")
