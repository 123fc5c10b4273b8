"""Inbound ports - API contract of the subset reconcile core.

The surrounding controller (watch loop / work queue) drives one
provisioning pass per deployment key through this contract and
requeues the key whenever the returned result carries an error.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Mapping, Protocol

from subset_controller.domain.entities.deployment import (
    ReconcileResult,
    RevisionPair,
    SubsetDeployment,
)
from subset_controller.domain.entities.subset import Subset, SubsetType


class SubsetProvisionerPort(Protocol):
    """Protocol for one subset provisioning pass.

    Thread Safety:
        Passes for the same deployment must be serialized by the caller.

    Example:
        result = provisioner.manage_subset_provision(
            deployment, name_to_subset, next_replicas, next_partitions,
            RevisionPair(current=current), SubsetType.STATEFUL_SET,
        )
        if not result.ok:
            queue.requeue(deployment.key)
    """

    @abstractmethod
    def manage_subset_provision(
        self,
        deployment: SubsetDeployment,
        name_to_subset: Mapping[str, Subset],
        next_replicas: Mapping[str, int],
        next_partitions: Mapping[str, int],
        revisions: RevisionPair,
        subset_type: SubsetType,
    ) -> ReconcileResult:
        """Converge the subsets of a deployment to its topology.

        Args:
            deployment: Desired object.
            name_to_subset: Observed subsets of the active type by subset name.
            next_replicas: Allocated replicas per subset name.
            next_partitions: Allocated partition per subset name.
            revisions: Current and updated revision.
            subset_type: Active subset type.

        Returns:
            Retained subset names and the aggregated error, if any.

        Raises:
            UnknownSubsetTypeError: If no control handles ``subset_type``.
        """
        ...


__all__ = [
    "SubsetProvisionerPort",
]
