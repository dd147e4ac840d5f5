"""
Exceptions for caller misuse — NOT for domain failures.

Domain failures travel as Failure values. The exceptions here signal that a
caller broke a contract of the core itself:

  - UnwrapError: asserted a variant that was not active (the explicit
    "this cannot happen" path, e.g. unwrap() on a Failure)
  - CompletionAlreadyDeliveredError: a completion was invoked twice
  - CompletionNotDeliveredError: an operation finished without invoking
    its completion
"""

from __future__ import annotations

from typing import Any


class TypedResultError(Exception):
    """Base class for all typed_result exceptions."""


class UnwrapError(TypedResultError):
    """Raised when a caller asserts the wrong variant of a Result."""

    def __init__(self, message: str, result: Any) -> None:
        super().__init__(message)
        self.result = result


class CompletionAlreadyDeliveredError(TypedResultError):
    """Raised when a single-shot completion is invoked more than once."""


class CompletionNotDeliveredError(TypedResultError):
    """Raised when an operation returns without delivering its result."""
