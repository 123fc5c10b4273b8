"""Event recorder that keeps events in memory and logs them."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any

from subset_controller.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RecordedEvent:
    """An event recorded against an object."""

    object_key: str
    event_type: str
    reason: str
    message: str
    timestamp: float = field(default_factory=time.time)


class RecordingEventRecorder:
    """EventRecorderPort implementation backed by a list.

    Every event is also emitted as a structured log line.
    """

    def __init__(self) -> None:
        self._events: list[RecordedEvent] = []
        self._lock = threading.Lock()

    def event(self, obj: Any, event_type: str, reason: str, message: str) -> None:
        key = getattr(obj, "key", repr(obj))
        with self._lock:
            self._events.append(RecordedEvent(
                object_key=str(key),
                event_type=event_type,
                reason=reason,
                message=message,
            ))
        logger.info("event_recorded", object=str(key), type=event_type, reason=reason, message=message)

    @property
    def events(self) -> list[RecordedEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
