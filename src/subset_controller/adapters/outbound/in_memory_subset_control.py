"""In-memory subset control for testing and development.

This adapter provides an in-memory implementation of the
SubsetControlPort protocol. Workload objects are stored as labelled
records, so listing goes through the same label recovery as a real
cluster, and failures can be injected per subset name.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import Optional

from subset_controller.domain.entities.deployment import SubsetDeployment
from subset_controller.domain.entities.subset import Subset, SubsetType
from subset_controller.domain.value_objects.identifiers import get_subset_prefix
from subset_controller.domain.value_objects.labels import (
    CONTROLLER_REVISION_HASH_LABEL_KEY,
    SUBSET_NAME_LABEL_KEY,
    revision_from_labels,
    subset_name_from_labels,
)
from subset_controller.infrastructure.logging import get_logger
from subset_controller.ports.outbound import SubsetControlError

logger = get_logger(__name__)

_SUFFIX_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"
_SUFFIX_LENGTH = 5


@dataclass
class WorkloadObject:
    """Stored workload object backing one subset."""

    name: str
    namespace: str
    owner_uid: str
    labels: dict[str, str] = field(default_factory=dict)
    replicas: int = 0
    partition: int = 0


class InMemorySubsetControl:
    """In-memory implementation of SubsetControlPort.

    Example:
        control = InMemorySubsetControl(SubsetType.STATEFUL_SET)
        control.create_subset(deployment, "zone-a", "rev-1", 3, 0)
        control.get_all_subsets(deployment)

    Failures are injected by subset name (create) or object name
    (delete); listing fails for every owner once ``fail_list`` is set.
    """

    def __init__(self, subset_type: SubsetType, seed: Optional[int] = None):
        """Initialize the control.

        Args:
            subset_type: Workload kind this control manages.
            seed: Seed for generated name suffixes.
        """
        self._subset_type = subset_type
        self._objects: dict[str, WorkloadObject] = {}
        self._lock = threading.Lock()
        self._random = random.Random(seed)

        self.create_failures: dict[str, Exception] = {}
        self.delete_failures: dict[str, Exception] = {}
        self.fail_list: Optional[Exception] = None
        self.create_calls: list[str] = []
        self.delete_calls: list[str] = []

    @property
    def subset_type(self) -> SubsetType:
        return self._subset_type

    def create_subset(
        self,
        owner: SubsetDeployment,
        subset_name: str,
        revision: str,
        replicas: int,
        partition: int,
    ) -> None:
        """Create a labelled workload object for the subset.

        An injected timeout still creates the object, the way a request
        timing out after reaching the server would.
        """
        with self._lock:
            self.create_calls.append(subset_name)
            failure = self.create_failures.get(subset_name)
            if failure is not None and not isinstance(failure, TimeoutError):
                raise failure

            name = self._generate_name(get_subset_prefix(owner.name, subset_name))
            self._objects[name] = WorkloadObject(
                name=name,
                namespace=owner.namespace,
                owner_uid=owner.uid,
                labels={
                    SUBSET_NAME_LABEL_KEY: subset_name,
                    CONTROLLER_REVISION_HASH_LABEL_KEY: revision,
                },
                replicas=replicas,
                partition=partition,
            )

        logger.debug("subset_object_created", object_name=name, subset=subset_name, replicas=replicas)
        if failure is not None:
            raise failure

    def delete_subset(self, subset: Subset) -> None:
        """Delete the workload object of a subset."""
        with self._lock:
            self.delete_calls.append(subset.name)
            failure = self.delete_failures.get(subset.name)
            if failure is not None:
                raise failure
            if self._objects.pop(subset.name, None) is None:
                raise SubsetControlError(f"{self._subset_type} {subset.key} not found")

    def get_all_subsets(self, owner: SubsetDeployment) -> list[Subset]:
        """List the subsets owned by a deployment, sorted by object name."""
        if self.fail_list is not None:
            raise self.fail_list

        with self._lock:
            owned = [
                obj for obj in self._objects.values()
                if obj.owner_uid == owner.uid and obj.namespace == owner.namespace
            ]

        subsets = []
        for obj in sorted(owned, key=lambda o: o.name):
            subsets.append(Subset(
                name=obj.name,
                namespace=obj.namespace,
                subset_name=subset_name_from_labels(obj.labels, obj.namespace, obj.name),
                subset_type=self._subset_type,
                revision=revision_from_labels(obj.labels),
                replicas=obj.replicas,
                partition=obj.partition,
                owner_uid=obj.owner_uid,
                labels=dict(obj.labels),
            ))
        return subsets

    def update_subset(
        self,
        subset: Subset,
        owner: SubsetDeployment,
        revision: str,
        replicas: int,
        partition: int,
    ) -> None:
        """Update replicas, partition and revision label of a subset."""
        with self._lock:
            obj = self._objects.get(subset.name)
            if obj is None:
                raise SubsetControlError(f"{self._subset_type} {subset.key} not found")
            obj.labels[CONTROLLER_REVISION_HASH_LABEL_KEY] = revision
            obj.replicas = replicas
            obj.partition = partition

    def put_object(self, obj: WorkloadObject) -> None:
        """Store a workload object directly, bypassing creation."""
        with self._lock:
            self._objects[obj.name] = obj

    def object_count(self) -> int:
        """Number of stored workload objects."""
        with self._lock:
            return len(self._objects)

    def _generate_name(self, prefix: str) -> str:
        while True:
            suffix = "".join(self._random.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
            name = prefix + suffix
            if name not in self._objects:
                return name


def create_in_memory_controls(seed: Optional[int] = None) -> dict[SubsetType, InMemorySubsetControl]:
    """Create one in-memory control per subset type."""
    return {t: InMemorySubsetControl(t, seed=seed) for t in SubsetType}
