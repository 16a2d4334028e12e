"""Precondition checks for validating arguments at the top of a function.

Every check tests one condition and raises on the first violation found:
``NullReferenceError`` when a required reference is ``None`` and
``InvalidArgumentError`` for everything else. Checks never catch, retry,
copy or mutate what they inspect, and keep no state between calls.

Examples
--------
>>> from preconditions import check_argument_in_range, check_not_null
>>> def resize(image, scale):
...     check_not_null(image, "image must not be None")
...     check_argument_in_range(scale, 0.1, 10.0, "scale")
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, NoReturn, Sequence, Sized

import numpy as np
import numpy.typing as npt

from .config import DEFAULT_FLOAT_FORMAT, float_format
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NullReferenceError,
    PreconditionError,
)
from .logging import log_failure

_logger = logging.getLogger(__name__)


def _raise(check: str, error: PreconditionError) -> NoReturn:
    log_failure(check, error)
    raise error


def _bound_float_format() -> str:
    # A bad setting must not replace the InvalidArgumentError being built.
    try:
        return float_format()
    except ConfigurationError as exc:
        _logger.warning("Ignoring float_format setting, using %r: %s", DEFAULT_FLOAT_FORMAT, exc)
        return DEFAULT_FLOAT_FORMAT


def _format_bound(bound: Any) -> str:
    """Render a range bound for an error message, independent of locale."""
    if isinstance(bound, np.generic):
        bound = bound.item()
    if isinstance(bound, float):
        if _bound_float_format() == "fixed":
            return f"{bound:.6f}"
        return repr(bound)
    return str(bound)


def _element_is_null(value_name: str, index: int) -> NullReferenceError:
    return NullReferenceError(
        f"{value_name}[{index}] must not be null",
        details={"param": value_name, "check": "elements_not_null", "index": index},
    )


def check_argument(expression: Any, message: str | None = None) -> None:
    """Ensure that an expression checking an argument is true.

    Raises
    ------
    InvalidArgumentError
        If ``expression`` is falsy. ``message`` is used verbatim.
    """
    if not expression:
        _raise("check_argument", InvalidArgumentError(message))


def check_not_null(reference: Any, message: str | None = None) -> None:
    """Ensure that ``reference`` is not ``None``.

    Raises
    ------
    NullReferenceError
        If ``reference`` is ``None``.
    """
    if reference is None:
        _raise("check_not_null", NullReferenceError(message))


def check_nonnegative(value: int, message: str | None = None) -> None:
    """Ensure that the numeric ``value`` is zero or greater."""
    if value < 0:
        _raise(
            "check_nonnegative",
            InvalidArgumentError(message, details={"check": "nonnegative", "value": value}),
        )


def check_positive(value: int, message: str | None = None) -> None:
    """Ensure that the numeric ``value`` is strictly greater than zero."""
    if value <= 0:
        _raise(
            "check_positive",
            InvalidArgumentError(message, details={"check": "positive", "value": value}),
        )


def check_argument_in_range(value: Any, lower: Any, upper: Any, value_name: str) -> None:
    """Ensure that ``value`` lies within the inclusive range ``[lower, upper]``.

    Works for any ordered numeric type (``int``, ``float``, NumPy scalars).
    The lower bound is tested first and ``lower <= upper`` is assumed.

    Parameters
    ----------
    value : number
        The value to check.
    lower, upper : number
        Inclusive endpoints of the range.
    value_name : str
        Name of the argument, used in the error message.

    Raises
    ------
    InvalidArgumentError
        ``"<value_name> is out of range of [<lower>, <upper>] (too low)"`` when
        ``value < lower``, or the same with ``(too high)`` when ``value > upper``.

    Examples
    --------
    >>> check_argument_in_range(5, 1, 10, "x")
    >>> check_argument_in_range(0, 1, 10, "x")
    Traceback (most recent call last):
        ...
    preconditions.exceptions.InvalidArgumentError: x is out of range of [1, 10] (too low)
    """
    if value < lower:
        violation = "too low"
    elif value > upper:
        violation = "too high"
    else:
        return
    _raise(
        "check_argument_in_range",
        InvalidArgumentError(
            f"{value_name} is out of range of "
            f"[{_format_bound(lower)}, {_format_bound(upper)}] ({violation})",
            details={
                "param": value_name,
                "check": "range",
                "lower": lower,
                "upper": upper,
                "violation": violation,
            },
        ),
    )


def check_string_not_empty(string: str | None, message: str | None = None) -> None:
    """Ensure that ``string`` is neither ``None`` nor zero-length.

    Both cases raise ``InvalidArgumentError``.
    """
    if string is None or len(string) == 0:
        _raise("check_string_not_empty", InvalidArgumentError(message))


def check_collection_not_empty(collection: Sized | None, message: str | None = None) -> None:
    """Ensure that ``collection`` is not ``None`` and has at least one element.

    Raises
    ------
    NullReferenceError
        If ``collection`` is ``None``.
    InvalidArgumentError
        If ``collection`` is empty.
    """
    if collection is None:
        _raise("check_collection_not_empty", NullReferenceError(message))
    if len(collection) == 0:
        _raise(
            "check_collection_not_empty",
            InvalidArgumentError(message, details={"check": "not_empty"}),
        )


def check_collection_elements_not_null(collection: Iterable[Any] | None, value_name: str) -> None:
    """Ensure that ``collection`` is not ``None`` and none of its elements are.

    Elements are visited in iteration order and the position of the first
    ``None`` is reported.

    Raises
    ------
    NullReferenceError
        ``"<value_name> must not be null"`` for a ``None`` collection, or
        ``"<value_name>[i] must not be null"`` for the first ``None`` element.
    """
    if collection is None:
        _raise(
            "check_collection_elements_not_null",
            NullReferenceError(
                f"{value_name} must not be null",
                details={"param": value_name, "check": "not_null"},
            ),
        )
    for index, element in enumerate(collection):
        if element is None:
            _raise("check_collection_elements_not_null", _element_is_null(value_name, index))


def _first_null_index(value: npt.NDArray[Any]) -> int | None:
    # Only object arrays can hold None; the reported index is the flat one.
    if value.dtype != object:
        return None
    for index, item in enumerate(value.flat):
        if item is None:
            return index
    return None


def check_array_elements_not_null(value: Sequence[Any] | npt.NDArray[Any] | None, value_name: str) -> None:
    """Ensure that the array and all of its elements are not ``None``.

    Accepts sequences (``list``, ``tuple``) and NumPy arrays. For a
    multi-dimensional ``ndarray`` the reported index is the flat index.

    Raises
    ------
    NullReferenceError
        ``"<value_name> must not be null"`` for a ``None`` array, or
        ``"<value_name>[i] must not be null"`` for the first ``None`` element.
    """
    if value is None:
        _raise(
            "check_array_elements_not_null",
            NullReferenceError(
                f"{value_name} must not be null",
                details={"param": value_name, "check": "not_null"},
            ),
        )
    if isinstance(value, np.ndarray):
        index = _first_null_index(value)
        if index is not None:
            _raise("check_array_elements_not_null", _element_is_null(value_name, index))
        return
    for index in range(len(value)):
        if value[index] is None:
            _raise("check_array_elements_not_null", _element_is_null(value_name, index))


def check_argument_finite(value: float, value_name: str) -> None:
    """Ensure that the floating point ``value`` is a finite number.

    Raises
    ------
    InvalidArgumentError
        ``"<value_name> must not be NaN"`` for NaN, or
        ``"<value_name> must not be infinite"`` for positive or negative infinity.
    """
    # Integers are always finite, and Python ints beyond float range break the ufuncs.
    if isinstance(value, (int, np.integer)):
        return
    if np.isnan(value):
        _raise(
            "check_argument_finite",
            InvalidArgumentError(
                f"{value_name} must not be NaN",
                details={"param": value_name, "check": "finite", "violation": "nan"},
            ),
        )
    if np.isinf(value):
        _raise(
            "check_argument_finite",
            InvalidArgumentError(
                f"{value_name} must not be infinite",
                details={"param": value_name, "check": "finite", "violation": "infinite"},
            ),
        )


__all__ = [
    "check_argument",
    "check_not_null",
    "check_nonnegative",
    "check_positive",
    "check_argument_in_range",
    "check_string_not_empty",
    "check_collection_not_empty",
    "check_collection_elements_not_null",
    "check_array_elements_not_null",
    "check_argument_finite",
]
