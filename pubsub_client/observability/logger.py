"""Structured logging for client calls (request, status, decode)."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Marks the stdout handler this module installs, so other handlers do not hide it.
_HANDLER_MARK = "_pubsub_client_stdout"


def _install_stdout_handler(logger: logging.Logger) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Return the named logger with a stdout handler installed exactly once.

    Loggers are process-wide: when `level` is given it is applied on every
    call, so the last caller decides the level for everyone sharing `name`.
    Without `level`, a logger that never had one starts at INFO.
    """
    logger = logging.getLogger(name)
    if not any(getattr(h, _HANDLER_MARK, False) for h in logger.handlers):
        _install_stdout_handler(logger)
    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    return logger
