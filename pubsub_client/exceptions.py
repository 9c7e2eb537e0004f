"""
Custom exceptions for the pub-sub client.

Transport failures (connection refused, DNS, timeouts) are not wrapped:
they reach the caller as httpx.HTTPError subclasses.
"""

from typing import Optional


class PubSubError(Exception):
    """Base exception for all pub/sub client errors."""
    pass


class InvalidTopicError(PubSubError, ValueError):
    """Raised when a topic name fails local validation, before any request is sent."""

    def __init__(self, topic: str, reason: str) -> None:
        super().__init__(f"invalid topic: {reason}")
        self.topic = topic
        self.reason = reason


class UnexpectedStatusError(PubSubError):
    """Raised when the service answers with a status code other than the expected one."""

    def __init__(
        self,
        operation: str,
        expected: int,
        status_code: int,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(f"{operation}: expected status code {expected}, got {status_code}")
        self.operation = operation
        self.expected = expected
        self.status_code = status_code
        self.body = body


class DecodeError(PubSubError):
    """Raised when a response body cannot be decoded into the expected envelope."""
    pass


class SerializationError(PubSubError):
    """Raised when a request body cannot be encoded as JSON."""
    pass
