"""Domain exceptions raised by GreenTrip services."""

from __future__ import annotations

from typing import Any


class GreenTripError(Exception):
    """Base exception for all service-level errors."""

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)


class InputValidationError(GreenTripError, ValueError):
    """Raised for bad caller input: distance, passengers, class, period, dates.

    Not retryable: the same input always fails the same way.
    """


class NotFoundError(GreenTripError, LookupError):
    """Raised when a referenced airport or flight does not exist."""
