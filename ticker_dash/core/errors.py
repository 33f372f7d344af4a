"""Error taxonomy for snapshot fetching.

An empty ticker is not an error (the submit is ignored) and missing payload
fields never raise; both are handled where they occur.
"""

from typing import Any


class DashboardError(Exception):
    """Base exception for the dashboard."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EmptyResultError(DashboardError):
    """The API answered successfully but returned no usable body."""


class TransportError(DashboardError):
    """Network failure, non-2xx status or an unreadable response body."""
