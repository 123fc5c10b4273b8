"""Subset entities: desired topology entries and observed subsets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from subset_controller.domain.value_objects.identifiers import ObjectKey, create_object_key

# Absolute replica count or a percentage string such as "30%"
ReplicaQuantity = Union[int, str]


class SubsetType(Enum):
    """Workload kind backing a subset.

    Declaration order is the iteration order used for cross-type cleanup.
    """
    STATEFUL_SET = "StatefulSet"
    ADVANCED_STATEFUL_SET = "AdvancedStatefulSet"
    CLONE_SET = "CloneSet"
    DEPLOYMENT = "Deployment"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NodeSelectorRequirement:
    """A single node label match expression."""
    key: str
    operator: str  # In, NotIn, Exists, DoesNotExist, Gt, Lt
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class NodeSelectorTerm:
    """ANDed set of node selector requirements."""
    match_expressions: tuple[NodeSelectorRequirement, ...] = ()


@dataclass(frozen=True)
class SubsetSpec:
    """One subset of the desired topology."""
    name: str
    node_selector_terms: tuple[NodeSelectorTerm, ...] = ()
    replicas: ReplicaQuantity | None = None  # None: left to the allocator


@dataclass
class Subset:
    """Observed subset backed by one workload object in the cluster.

    ``name`` is the workload object name; ``subset_name`` is the logical
    name recovered from the subset name label.
    """
    name: str
    namespace: str
    subset_name: str
    subset_type: SubsetType
    revision: str = ""
    replicas: int = 0
    partition: int = 0
    owner_uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> ObjectKey:
        """Namespaced key of the workload object."""
        return create_object_key(self.namespace, self.name)
