"""Fulfillment error taxonomy.

Every error is converted to the fallback reply at the handler boundary;
none of them reach the platform as a transport-level failure.
"""

from __future__ import annotations


class WebhookError(Exception):
    """Base class for errors raised while fulfilling a turn."""

    outcome = "unexpected_error"


class CapabilityError(WebhookError):
    """Raised when the completion call fails or returns no usable content."""

    outcome = "capability_error"


class MalformedInputError(WebhookError):
    """Raised when the inbound payload lacks the fields a turn needs."""

    outcome = "malformed_input"

    def __init__(self, message: str, *, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
