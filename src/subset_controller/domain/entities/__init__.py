"""Domain entities for the subset controller."""

from subset_controller.domain.entities.deployment import (
    ReconcileResult,
    Revision,
    RevisionPair,
    SubsetDeployment,
    Topology,
)
from subset_controller.domain.entities.subset import (
    NodeSelectorRequirement,
    NodeSelectorTerm,
    ReplicaQuantity,
    Subset,
    SubsetSpec,
    SubsetType,
)

__all__ = [
    "ReconcileResult",
    "Revision",
    "RevisionPair",
    "SubsetDeployment",
    "Topology",
    "NodeSelectorRequirement",
    "NodeSelectorTerm",
    "ReplicaQuantity",
    "Subset",
    "SubsetSpec",
    "SubsetType",
]
