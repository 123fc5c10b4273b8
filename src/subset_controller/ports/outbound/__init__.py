"""Outbound ports - Cluster-facing interfaces for the subset controller.

Outbound ports define the capabilities the reconcile core consumes:
one subset control per workload kind, and an event recorder.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol

from subset_controller.domain.entities.deployment import SubsetDeployment
from subset_controller.domain.entities.subset import Subset


# =============================================================================
# Subset Control Port
# =============================================================================


class SubsetControlPort(Protocol):
    """Protocol for the workload objects backing one subset type.

    Implementations talk to the cluster control plane. Deadlines,
    cancellation and optimistic-concurrency retries (bounded by
    ``ProvisionConfig.update_retries``) are the implementation's concern.

    Thread Safety:
        ``create_subset`` is called concurrently during slow-start rounds.
    """

    @abstractmethod
    def create_subset(
        self,
        owner: SubsetDeployment,
        subset_name: str,
        revision: str,
        replicas: int,
        partition: int,
    ) -> None:
        """Create the workload object of a subset.

        Args:
            owner: Owning deployment.
            subset_name: Logical subset name.
            revision: Revision name stamped onto the object.
            replicas: Desired replicas.
            partition: Desired partition.

        Raises:
            SubsetControlTimeoutError: If the call timed out; the object
                may or may not have been created.
            SubsetControlError: If creation fails.
        """
        ...

    @abstractmethod
    def delete_subset(self, subset: Subset) -> None:
        """Delete the workload object of a subset.

        Raises:
            SubsetControlError: If deletion fails.
        """
        ...

    @abstractmethod
    def get_all_subsets(self, owner: SubsetDeployment) -> list[Subset]:
        """List every subset of this type owned by a deployment.

        Raises:
            MissingNameLabelError: If an owned object has no subset name.
            SubsetControlError: If listing fails.
        """
        ...

    @abstractmethod
    def update_subset(
        self,
        subset: Subset,
        owner: SubsetDeployment,
        revision: str,
        replicas: int,
        partition: int,
    ) -> None:
        """Update an existing subset in place.

        Raises:
            SubsetControlError: If the update fails.
        """
        ...


class SubsetControlError(Exception):
    """Raised when a subset control operation fails."""

    pass


class SubsetControlTimeoutError(SubsetControlError, TimeoutError):
    """Raised when a subset control call times out."""

    pass


def is_timeout_error(error: BaseException) -> bool:
    """Check whether an error is timeout-class."""
    return isinstance(error, TimeoutError)


# =============================================================================
# Event Recorder Port
# =============================================================================

EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"


class EventRecorderPort(Protocol):
    """Protocol for recording events against cluster objects."""

    @abstractmethod
    def event(self, obj: Any, event_type: str, reason: str, message: str) -> None:
        """Record an event.

        Args:
            obj: Object the event refers to.
            event_type: ``Normal`` or ``Warning``.
            reason: Short CamelCase reason.
            message: Human readable message.
        """
        ...


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Subset control
    "SubsetControlPort",
    "SubsetControlError",
    "SubsetControlTimeoutError",
    "is_timeout_error",
    # Events
    "EventRecorderPort",
    "EVENT_TYPE_NORMAL",
    "EVENT_TYPE_WARNING",
]
