"""fp_utils.

Functional-programming glue for application code: a Result type with
short-circuiting combinators, composition and currying helpers, collection
combinators and a background to foreground dispatch helper.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "fp-utils Team"

from fp_utils.dispatch import Dispatcher
from fp_utils.exceptions import (
    DispatcherClosedError,
    FpUtilsError,
    InvalidArgumentError,
    UnwrapError,
)
from fp_utils.shared.result import (
    Failure,
    Result,
    Success,
    attempt,
    err,
    ok,
    sequence,
    traverse,
)

__all__ = [
    "Dispatcher",
    "DispatcherClosedError",
    "Failure",
    "FpUtilsError",
    "InvalidArgumentError",
    "Result",
    "Success",
    "UnwrapError",
    "__version__",
    "attempt",
    "err",
    "ok",
    "sequence",
    "traverse",
]
