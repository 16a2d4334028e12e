"""Exception hierarchy for preconditions.

Every failed check raises one of two kinds: ``NullReferenceError`` when a
required reference is ``None`` and ``InvalidArgumentError`` for any other
violation. Both inherit from ``PreconditionError`` and carry an optional
structured ``details`` payload next to the message.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PreconditionError",
    "InvalidArgumentError",
    "NullReferenceError",
    "ConfigurationError",
    "explain_exception",
]


class PreconditionError(Exception):
    """Base class for library-specific errors."""

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        """Attach structured error details alongside the (optional) message."""
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.details: dict[str, Any] | None = details

    @property
    def message(self) -> str | None:
        """Return the message the error was raised with, or ``None``."""
        return self.args[0] if self.args else None

    def __repr__(self) -> str:
        """Return the exception representation with the message payload."""
        cls = self.__class__.__name__
        if not self.args:
            return f"{cls}()"
        return f"{cls}({self.args[0]!r})"


class InvalidArgumentError(PreconditionError, ValueError):
    """An argument failed a boolean, range, emptiness or finiteness check."""


class NullReferenceError(PreconditionError, TypeError):
    """A required reference, collection, array or element was ``None``."""


class ConfigurationError(PreconditionError):
    """Invalid value in ``[tool.preconditions]`` or a ``PRECONDITIONS_*`` variable."""


def explain_exception(e: Exception) -> str:
    """Describe a failed check for logs and diagnostics.

    A ``PreconditionError`` renders as ``"<Class>: <message>"``, plus an
    indented ``Details:`` line when the error carries a payload. Foreign
    exceptions fall back to ``str(e)``.

    >>> from preconditions import check_argument_in_range
    >>> try:
    ...     check_argument_in_range(12, 0, 10, "port_offset")
    ... except PreconditionError as err:
    ...     print(explain_exception(err))  # doctest: +NORMALIZE_WHITESPACE
    InvalidArgumentError: port_offset is out of range of [0, 10] (too high)
      Details: {'param': 'port_offset', 'check': 'range', 'lower': 0, 'upper': 10,
                'violation': 'too high'}
    """
    if not isinstance(e, PreconditionError):
        return str(e)
    summary = f"{type(e).__name__}: {e}"
    if e.details is None:
        return summary
    return f"{summary}\n  Details: {e.details}"
