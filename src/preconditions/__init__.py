"""
Preconditions (preconditions).

Fail-fast argument and state checks to call at the top of a function:
null checks, range checks, emptiness checks and finiteness checks.
"""

import logging as _logging

from .checks import (
    check_argument,
    check_argument_finite,
    check_argument_in_range,
    check_array_elements_not_null,
    check_collection_elements_not_null,
    check_collection_not_empty,
    check_nonnegative,
    check_not_null,
    check_positive,
    check_string_not_empty,
)
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NullReferenceError,
    PreconditionError,
    explain_exception,
)

# Provide a default no-op handler to avoid "No handler" warnings for library users.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "1.0.0"

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
    "PreconditionError",
    "InvalidArgumentError",
    "NullReferenceError",
    "ConfigurationError",
    "explain_exception",
]
