"""Observability: logging and metrics for the pub-sub client."""

from pubsub_client.observability.logger import get_logger
from pubsub_client.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
