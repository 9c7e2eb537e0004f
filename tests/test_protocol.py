"""Wire records, response envelopes and resource paths."""

import pydantic
import pytest

from pubsub_client import GetMessagesResponse, ListTopicsResponse, Message, PullResponse, Topic
from pubsub_client.protocol import messages_path, publish_path, pull_path, subscriptions_path


def test_message_echo_decodes_to_equal_value() -> None:
    message = Message(data="payload")

    echoed = Message.model_validate_json(message.model_dump_json())

    assert echoed == message
    assert message.to_dict() == {"data": "payload"}


def test_records_are_immutable() -> None:
    message = Message(data="payload")
    with pytest.raises(pydantic.ValidationError):
        message.data = "changed"  # type: ignore[misc]


def test_topic_type_defaults_to_empty() -> None:
    assert Topic(name="t").to_dict() == {"name": "t", "type": ""}


def test_envelopes_ignore_unknown_keys_and_default_missing_ones() -> None:
    assert PullResponse.model_validate_json('{"error": "x"}').message == Message()
    assert PullResponse.model_validate_json('{"message": null}').message == Message()
    assert ListTopicsResponse.model_validate_json('{"topics": null}').topics == []
    assert GetMessagesResponse.model_validate_json("{}").messages == []


def test_list_topics_response_rejects_non_string_names() -> None:
    with pytest.raises(pydantic.ValidationError):
        ListTopicsResponse.model_validate_json('{"topics": [1, 2]}')


def test_paths() -> None:
    assert subscriptions_path("orders") == "/topics/orders/subscriptions"
    assert publish_path("orders") == "/topics/orders/publish"
    assert messages_path("orders") == "/topics/orders/messages"
    assert pull_path("orders worker") == "/subscriptions/orders%20worker/pull"
