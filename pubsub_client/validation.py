"""Local validation of topic names before any request is issued."""

from typing import Annotated

from pydantic import StringConstraints, TypeAdapter, ValidationError

from pubsub_client.exceptions import InvalidTopicError

MIN_TOPIC_LENGTH = 1
MAX_TOPIC_LENGTH = 255

TopicName = Annotated[
    str,
    StringConstraints(strict=True, min_length=MIN_TOPIC_LENGTH, max_length=MAX_TOPIC_LENGTH),
]

_topic_name_adapter: TypeAdapter = TypeAdapter(TopicName)


def validate_topic(topic: str) -> str:
    """Return `topic` unchanged if it is a non-empty string of at most 255 characters.

    Raises InvalidTopicError otherwise.
    """
    try:
        return _topic_name_adapter.validate_python(topic)
    except ValidationError as e:
        error = e.errors()[0]
        if error["type"] == "string_too_short":
            reason = "cannot be blank"
        elif error["type"] == "string_too_long":
            reason = f"the length must be between {MIN_TOPIC_LENGTH} and {MAX_TOPIC_LENGTH}"
        else:
            reason = error["msg"]
        raise InvalidTopicError(topic, reason) from e
