"""Protocol shapes for the HTTP API: resource paths, status codes and response envelopes."""

from typing import Any, List
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pubsub_client.message import Message

JSON_CONTENT_TYPE = "application/json"

# ---- Status codes ----

STATUS_OK = 200
STATUS_CREATED = 201


# ---- Paths ----

def _segment(name: str) -> str:
    return quote(name, safe="")


def topics_path() -> str:
    """POST /topics (create), GET /topics (list)."""
    return "/topics"


def subscriptions_path(topic_name: str) -> str:
    return f"/topics/{_segment(topic_name)}/subscriptions"


def publish_path(topic_name: str) -> str:
    return f"/topics/{_segment(topic_name)}/publish"


def messages_path(topic_name: str) -> str:
    return f"/topics/{_segment(topic_name)}/messages"


def pull_path(subscription_name: str) -> str:
    return f"/subscriptions/{_segment(subscription_name)}/pull"


# ---- Responses ----

class PullResponse(BaseModel):
    """Body of GET /subscriptions/{sub}/pull."""

    model_config = ConfigDict(frozen=True)

    message: Message = Field(default_factory=Message)

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return Message() if value is None else value


class ListTopicsResponse(BaseModel):
    """Body of GET /topics: topic names only, in server order."""

    model_config = ConfigDict(frozen=True)

    topics: List[str] = Field(default_factory=list)

    @field_validator("topics", mode="before")
    @classmethod
    def _null_topics(cls, value: Any) -> Any:
        return [] if value is None else value


class GetMessagesResponse(BaseModel):
    """Body of GET /topics/{topic}/messages."""

    model_config = ConfigDict(frozen=True)

    messages: List[Message] = Field(default_factory=list)

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages(cls, value: Any) -> Any:
        return [] if value is None else value
