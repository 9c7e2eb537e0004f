"""Synchronous HTTP client for the pub-sub service: topics, subscriptions, publish, pull."""

from typing import List, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from pubsub_client.config import DEFAULT_TIMEOUT_SEC, ClientConfig
from pubsub_client.exceptions import DecodeError, SerializationError, UnexpectedStatusError
from pubsub_client.message import Message
from pubsub_client.observability import Metrics, get_logger
from pubsub_client.protocol import (
    JSON_CONTENT_TYPE,
    STATUS_CREATED,
    STATUS_OK,
    GetMessagesResponse,
    ListTopicsResponse,
    PullResponse,
    messages_path,
    publish_path,
    pull_path,
    subscriptions_path,
    topics_path,
)
from pubsub_client.topic import Subscription, Topic
from pubsub_client.validation import validate_topic

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class PubSubClient:
    """
    Client for the pub-sub HTTP API.

    Every call is one blocking request/response (ensure_topic_exists makes up
    to two) through a single httpx.Client. Nothing is retried. The instance
    keeps no per-call state, so it can be shared between threads as long as
    the injected transport can.
    """

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.Client] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        metrics: Optional[Metrics] = None,
        log_level: Optional[Union[int, str]] = None,
    ) -> None:
        """
        Args:
            base_url: Service root, e.g. "http://localhost:8080".
            http_client: Transport used for every call. When omitted, an
                httpx.Client with `timeout` seconds per request is created and
                owned (closed by close()).
            timeout: Per-request timeout for the default transport only.
            metrics: Collector for request counters; a new one if omitted.
            log_level: Level for the shared "pubsub_client.client" logger.
                Applied on every construction, so it is process-wide; None
                leaves the current level alone.
        """
        self._base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=timeout)
        self._http_client = http_client
        self._metrics = metrics if metrics is not None else Metrics()
        self._logger = get_logger("pubsub_client.client", log_level)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "PubSubClient":
        return cls(config.base_url, timeout=config.timeout_sec, log_level=config.log_level)

    @classmethod
    def from_env(cls) -> "PubSubClient":
        """Build a client from PUBSUB_* environment variables (a .env file is honored)."""
        return cls.from_config(ClientConfig.from_env())

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def close(self) -> None:
        """Close the transport if this client created it; injected transports are left open."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "PubSubClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- Topics ----

    def create_topic(self, topic: Topic) -> None:
        """POST /topics; succeeds only on 201 Created."""
        response = self._send("create_topic", "POST", topics_path(), body=topic)
        self._expect_status("create_topic", response, STATUS_CREATED)

    def list_topics(self) -> List[str]:
        """GET /topics; returns topic names in the order the server lists them."""
        response = self._send("list_topics", "GET", topics_path())
        self._expect_status("list_topics", response, STATUS_OK)
        return self._decode("list_topics", response, ListTopicsResponse).topics

    def topic_exists(self, topic: str) -> bool:
        """Validate `topic`, then look for an exact match in list_topics()."""
        validate_topic(topic)
        for name in self.list_topics():
            if name == topic:
                return True
        return False

    def ensure_topic_exists(self, topic: str) -> None:
        """Create `topic` (with an empty type) unless the server already lists it."""
        validate_topic(topic)
        if self.topic_exists(topic):
            return
        self.create_topic(Topic(name=topic))
        self._logger.info("topic_created_on_demand", extra={"topic": topic})

    def get_messages(self, topic: str) -> List[Message]:
        """GET /topics/{topic}/messages; requires 200."""
        validate_topic(topic)
        response = self._send(
            "get_messages",
            "GET",
            messages_path(topic),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
        self._expect_status("get_messages", response, STATUS_OK)
        return self._decode("get_messages", response, GetMessagesResponse).messages

    # ---- Subscriptions ----

    def create_subscription(self, topic_name: str, subscription: Subscription) -> None:
        """POST /topics/{topic}/subscriptions; succeeds only on 201 Created."""
        response = self._send(
            "create_subscription", "POST", subscriptions_path(topic_name), body=subscription
        )
        self._expect_status("create_subscription", response, STATUS_CREATED)

    def pull_message(self, subscription_name: str) -> Message:
        """
        GET /subscriptions/{sub}/pull and return the wrapped message.

        The status code is not checked: the body is decoded whatever the
        server answered. An error response whose body is not a PullResponse
        raises DecodeError (not UnexpectedStatusError), and an error response
        carrying some other JSON object yields an empty Message.
        """
        response = self._send("pull_message", "GET", pull_path(subscription_name))
        return self._decode("pull_message", response, PullResponse).message

    # ---- Publish ----

    def publish_message(
        self,
        topic_name: str,
        message: Message,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        POST /topics/{topic}/publish; succeeds only on 201 Created.

        Every entry of `headers` is set on the request after the default
        Content-Type, so callers may override it.
        """
        response = self._send(
            "publish_message", "POST", publish_path(topic_name), body=message, headers=headers
        )
        self._expect_status("publish_message", response, STATUS_CREATED)

    # ---- Internals ----

    def _send(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        body: Optional[BaseModel] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        request_headers = httpx.Headers()
        content: Optional[str] = None
        if body is not None:
            content = self._encode(operation, body)
            request_headers["Content-Type"] = JSON_CONTENT_TYPE
        for key, value in (headers or {}).items():
            request_headers[key] = value

        self._metrics.increment("requests_total")
        self._metrics.increment(f"requests.{operation}")
        try:
            response = self._http_client.request(
                method, f"{self._base_url}{path}", content=content, headers=request_headers
            )
        except httpx.HTTPError as e:
            self._metrics.increment(f"errors.{operation}")
            self._logger.warning(
                "request_failed",
                extra={"operation": operation, "method": method, "path": path, "error": str(e)},
            )
            raise

        self._metrics.increment(f"responses.{response.status_code}")
        self._metrics.set_gauge(f"last_status.{operation}", response.status_code)
        self._logger.debug(
            "request_sent",
            extra={
                "operation": operation,
                "method": method,
                "path": path,
                "status_code": response.status_code,
            },
        )
        return response

    def _encode(self, operation: str, body: BaseModel) -> str:
        try:
            return body.model_dump_json()
        except (ValueError, TypeError) as e:
            self._metrics.increment(f"errors.{operation}")
            raise SerializationError(f"{operation}: failed to encode request body: {e}") from e

    def _expect_status(self, operation: str, response: httpx.Response, expected: int) -> None:
        if response.status_code == expected:
            return
        self._metrics.increment(f"errors.{operation}")
        self._logger.warning(
            "unexpected_status",
            extra={
                "operation": operation,
                "expected": expected,
                "status_code": response.status_code,
            },
        )
        raise UnexpectedStatusError(operation, expected, response.status_code, response.text)

    def _decode(
        self, operation: str, response: httpx.Response, model: Type[ResponseModel]
    ) -> ResponseModel:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            self._metrics.increment(f"errors.{operation}")
            self._logger.warning(
                "decode_failed",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise DecodeError(f"{operation}: failed to decode response: {e}") from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r})"
