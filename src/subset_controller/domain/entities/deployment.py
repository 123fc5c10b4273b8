"""Topology deployment (owner object) and per-pass reconcile values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from subset_controller.domain.entities.subset import SubsetSpec
from subset_controller.domain.value_objects.identifiers import ObjectKey, create_object_key

if TYPE_CHECKING:
    from subset_controller.domain.services.error_aggregator import AggregateError


@dataclass
class Topology:
    """Ordered list of desired subsets."""
    subsets: list[SubsetSpec] = field(default_factory=list)


@dataclass
class SubsetDeployment:
    """Desired object describing a topology of subsets."""
    name: str
    namespace: str = "default"
    uid: str = ""
    replicas: int = 0  # Total replicas across all subsets
    topology: Topology = field(default_factory=Topology)

    @property
    def key(self) -> ObjectKey:
        """Namespaced key of the deployment."""
        return create_object_key(self.namespace, self.name)


@dataclass(frozen=True)
class Revision:
    """Immutable pod template snapshot stamped onto subsets."""
    name: str
    revision: int = 0


@dataclass(frozen=True)
class RevisionPair:
    """Current and (optionally) updated revision for one reconcile pass."""
    current: Revision
    updated: Optional[Revision] = None


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of one provisioning pass."""
    retained: frozenset[str]
    error: Optional["AggregateError"] = None

    @property
    def ok(self) -> bool:
        """True when the pass completed without errors."""
        return self.error is None
