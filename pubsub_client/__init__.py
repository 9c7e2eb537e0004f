"""HTTP client for a remote pub-sub service (topics, subscriptions, publish, pull)."""

from pubsub_client.client import PubSubClient
from pubsub_client.config import ClientConfig
from pubsub_client.exceptions import (
    DecodeError,
    InvalidTopicError,
    PubSubError,
    SerializationError,
    UnexpectedStatusError,
)
from pubsub_client.message import Message
from pubsub_client.protocol import GetMessagesResponse, ListTopicsResponse, PullResponse
from pubsub_client.topic import Subscription, Topic

__version__ = "1.0.0"

__all__ = [
    "PubSubClient",
    "ClientConfig",
    "Message",
    "Topic",
    "Subscription",
    "PullResponse",
    "ListTopicsResponse",
    "GetMessagesResponse",
    "PubSubError",
    "InvalidTopicError",
    "UnexpectedStatusError",
    "DecodeError",
    "SerializationError",
]
