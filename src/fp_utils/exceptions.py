"""Library exceptions.

All fp_utils exceptions inherit from FpUtilsError.
"""
from __future__ import annotations

from typing import Any


class FpUtilsError(Exception):
    """Base exception for fp_utils errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class UnwrapError(FpUtilsError, ValueError):
    def __init__(self, error: Any) -> None:
        super().__init__(f"Cannot unwrap Failure: {error}", {"error": repr(error)})
        self.error = error


class InvalidArgumentError(FpUtilsError, ValueError):
    def __init__(self, argument: str, message: str, value: Any = None) -> None:
        full_message = f"Invalid argument '{argument}': {message}"
        details = {"argument": argument, "value": value}
        super().__init__(full_message, details)
        self.argument = argument
        self.value = value


class DispatcherClosedError(FpUtilsError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("Dispatcher is closed; no further handoffs are accepted")
