"""
Errors raised while loading the price feed.

Aggregation never raises; only the network load is fallible.
"""

from __future__ import annotations


class FeedError(Exception):
    """Base class: the feed could not be turned into price records."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FeedHTTPError(FeedError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class FeedFormatError(FeedError):
    """Payload is not a JSON array of price records."""
