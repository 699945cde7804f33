"""Logging setup for the concierge service."""
from __future__ import annotations

import logging
import os
from pathlib import Path

# Per-request connection chatter from the generation client's HTTP stack.
_NOISY_LOGGERS = ("urllib3",)


def setup_logging() -> None:
    """Send concierge logs to stderr and, optionally, to a file.

    ``CONCIERGE_LOG_LEVEL`` picks the root level (``INFO`` by default, so index
    builds and generation fallbacks show up; ``DEBUG`` adds cache hits and
    skipped chat bodies). ``CONCIERGE_LOG_FILE`` adds a UTF-8 file handler.
    ``urllib3`` is held at ``WARNING`` unless the root level is ``DEBUG``.

    Does nothing when the root logger already has handlers, e.g. when a test
    runner or a hosting application configured logging first.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = os.getenv("CONCIERGE_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    log_file = os.getenv("CONCIERGE_LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
    if level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
