"""Client settings read from the environment (or a .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ClientConfig:
    """Where the service lives and how long a single request may take."""

    base_url: str = DEFAULT_BASE_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ClientConfig":
        """Build config from PUBSUB_BASE_URL, PUBSUB_TIMEOUT_SEC and PUBSUB_LOG_LEVEL."""
        if load_dotenv_file:
            load_dotenv()
        base_url = (os.environ.get("PUBSUB_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        try:
            timeout = float(os.environ.get("PUBSUB_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC))
        except (ValueError, TypeError):
            timeout = DEFAULT_TIMEOUT_SEC
        if timeout <= 0:
            timeout = DEFAULT_TIMEOUT_SEC
        log_level = (os.environ.get("PUBSUB_LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL
        return cls(base_url=base_url, timeout_sec=timeout, log_level=log_level)
