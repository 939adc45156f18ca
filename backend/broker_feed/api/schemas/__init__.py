"""API schema package."""

from broker_feed.api.schemas.feed import (
    ErrorResponse,
    PolicyOut,
    RawBrokerResponse,
    StandardizedFeedResponse,
)

__all__ = ["ErrorResponse", "PolicyOut", "RawBrokerResponse", "StandardizedFeedResponse"]
