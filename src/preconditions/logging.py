"""Logging utilities for preconditions.

Failed checks are silent by default. Setting ``PRECONDITIONS_LOG_FAILURES``
(or ``log_failures = true`` under ``[tool.preconditions]``) makes every
failure emit one DEBUG record before the error propagates.
"""

from __future__ import annotations

import logging

from .config import log_failures
from .exceptions import PreconditionError

_logger = logging.getLogger("preconditions.checks")


def failure_logging_enabled() -> bool:
    """Return whether failure records are emitted."""
    return log_failures()


def log_failure(check: str, error: PreconditionError) -> None:
    """Emit a debug record describing ``error`` raised by ``check``."""
    if not failure_logging_enabled():
        return
    _logger.debug(
        "%s failed: %s: %s",
        check,
        error.__class__.__name__,
        error,
        extra={"check": check, "details": error.details},
    )


__all__ = [
    "failure_logging_enabled",
    "log_failure",
]
