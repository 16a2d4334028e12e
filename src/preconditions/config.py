"""Configuration parsing for preconditions.

Settings live in the ``[tool.preconditions]`` table of the ``pyproject.toml``
found in the current working directory. Environment variables take
precedence over the file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Sequence

from .exceptions import ConfigurationError

try:
    import tomllib as _tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    try:  # pragma: no cover - optional dependency path
        import tomli as _tomllib  # type: ignore[assignment]
    except ModuleNotFoundError:  # pragma: no cover - tomllib unavailable
        _tomllib = None  # type: ignore[assignment]

_SECTION = ("tool", "preconditions")

FLOAT_FORMAT_ENV = "PRECONDITIONS_FLOAT_FORMAT"
LOG_FAILURES_ENV = "PRECONDITIONS_LOG_FAILURES"

FLOAT_FORMATS = ("repr", "fixed")
DEFAULT_FLOAT_FORMAT = "repr"


def read_pyproject_section(path: Sequence[str]) -> Dict[str, Any]:
    """Look up a table of the working directory's ``pyproject.toml``.

    ``path`` lists the dotted table name key by key, so
    ``("tool", "preconditions")`` selects ``[tool.preconditions]``. Anything
    short of a readable file holding that table (no TOML parser, no file,
    a syntax error, a missing key, a scalar where a table was expected)
    yields ``{}``; configuration never breaks a check.

    >>> read_pyproject_section(("tool", "preconditions")).get("float_format", "repr")
    'repr'
    """
    pyproject = Path.cwd() / "pyproject.toml"
    if _tomllib is None or not pyproject.is_file():
        return {}
    try:
        table: Any = _tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}

    for key in path:
        table = table.get(key) if isinstance(table, dict) else None
    return dict(table) if isinstance(table, dict) else {}


def coerce_bool(value: str | bool | None) -> bool:
    """Interpret an env or TOML value as a boolean flag."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on", "enable"}


def _setting(key: str, env_name: str) -> Any:
    env_value = os.environ.get(env_name)
    if env_value is not None:
        return env_value
    config = read_pyproject_section(_SECTION)
    return config.get(key) if config else None


def float_format() -> str:
    """Return how floating range bounds are rendered in error messages.

    ``"repr"`` uses Python's shortest round-trip representation (``0.5``),
    ``"fixed"`` uses six decimals (``0.500000``). Both are locale independent.
    """
    value = _setting("float_format", FLOAT_FORMAT_ENV)
    if value is None:
        return DEFAULT_FLOAT_FORMAT
    normalized = str(value).strip().lower()
    if normalized not in FLOAT_FORMATS:
        raise ConfigurationError(
            f"Unknown float_format {value!r}; expected one of {', '.join(FLOAT_FORMATS)}.",
            details={"key": "float_format", "value": value, "allowed": list(FLOAT_FORMATS)},
        )
    return normalized


def log_failures() -> bool:
    """Return whether failed checks should emit a debug log record."""
    return coerce_bool(_setting("log_failures", LOG_FAILURES_ENV))


__all__ = [
    "read_pyproject_section",
    "coerce_bool",
    "float_format",
    "log_failures",
    "FLOAT_FORMATS",
    "FLOAT_FORMAT_ENV",
    "LOG_FAILURES_ENV",
]
