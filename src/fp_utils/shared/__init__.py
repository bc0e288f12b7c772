"""Shared module.

Cross-cutting concerns: configuration, logging, result pattern.
"""
from fp_utils.shared.config import Settings, get_settings, settings
from fp_utils.shared.logging import configure_logging, get_logger
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
    "Failure",
    "Result",
    "Settings",
    "Success",
    "attempt",
    "configure_logging",
    "err",
    "get_logger",
    "get_settings",
    "ok",
    "sequence",
    "settings",
    "traverse",
]
