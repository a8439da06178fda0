import logging
import threading
from collections import deque
from typing import Deque, Dict, Iterable, List, Optional

from radattrs.config import get_settings

LOGGER_NAME = "radattrs"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: str = "INFO", propagate: bool = True) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level.upper())
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = propagate
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)


def get_ring_handler(logger: Optional[logging.Logger] = None) -> Optional[RingBufferHandler]:
    logger = logger or get_logger()
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact(details: Optional[dict], redacted_types: Optional[Iterable[int]] = None) -> dict:
    """
    Mask attribute values in a log ``details`` dict.

    A ``value`` key is masked when the accompanying ``type`` is one of the
    redacted attribute types (``Settings.redacted_types`` by default).
    """
    if not details:
        return {}
    if redacted_types is None:
        redacted_types = get_settings().redacted_types
    hidden = set(redacted_types)
    cleaned = dict(details)
    if cleaned.get("type") in hidden and "value" in cleaned:
        cleaned["value"] = "***"
    return cleaned
