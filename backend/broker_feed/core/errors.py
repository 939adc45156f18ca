"""
Exceptions raised by the broker feed.

Everything derives from FeedError.  The broker source and step name ride
along on the exception so log lines can be bound straight from it.
"""

from __future__ import annotations

from typing import Any


class FeedError(Exception):
    """Base exception for all feed errors."""

    def __init__(self, message: str, *, source: str | None = None, step_name: str | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.step_name = step_name

    def log_fields(self) -> dict[str, Any]:
        """Non-empty context attributes, ready for `logger.bind(**...)`."""
        return {k: v for k, v in vars(self).items() if v is not None}


class StepExecutionError(FeedError):
    """A feed step could not finish; the query stops."""


class NormalizationError(FeedError):
    """A raw broker record cannot be turned into a CanonicalPolicy."""


class SourceRetrievalError(FeedError):
    """The transport to a broker source failed before any response arrived."""

    def __init__(self, message: str, *, url: str | None = None, **context: Any) -> None:
        super().__init__(message, **context)
        self.url = url
