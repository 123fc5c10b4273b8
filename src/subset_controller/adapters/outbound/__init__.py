"""Outbound adapters - Implementations of outbound port interfaces.

Provides in-memory implementations for testing and development without a cluster.
"""

from subset_controller.adapters.outbound.event_recorder import (
    RecordedEvent,
    RecordingEventRecorder,
)
from subset_controller.adapters.outbound.in_memory_subset_control import (
    InMemorySubsetControl,
    WorkloadObject,
    create_in_memory_controls,
)

__all__ = [
    # Events
    "RecordedEvent",
    "RecordingEventRecorder",
    # Subset control
    "InMemorySubsetControl",
    "WorkloadObject",
    "create_in_memory_controls",
]
