"""Example: create a topic and subscription, publish, then pull (needs a running service)."""

import logging

from pubsub_client import Message, PubSubClient, Subscription

logging.basicConfig(level=logging.INFO)


def main() -> None:
    with PubSubClient.from_env() as client:
        client.ensure_topic_exists("events")
        client.create_subscription("events", Subscription(name="events-worker", type="pull"))

        client.publish_message("events", Message(data='{"event": "user.signup", "user_id": 101}'))
        client.publish_message(
            "events",
            Message(data='{"event": "order.placed", "order_id": 201}'),
            headers={"X-Request-Id": "order-201"},
        )

        print(client.pull_message("events-worker"))
        print(client.get_messages("events"))
        print(client.metrics.snapshot())


if __name__ == "__main__":
    main()
