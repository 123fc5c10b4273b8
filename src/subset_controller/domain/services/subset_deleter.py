"""Best-effort subset deletion and cross-type cleanup."""

from __future__ import annotations

from typing import Iterable, Mapping

from subset_controller.domain.entities.deployment import SubsetDeployment
from subset_controller.domain.entities.subset import Subset, SubsetType
from subset_controller.domain.services.provision_errors import (
    SubsetDeletionError,
    SubsetListError,
)
from subset_controller.infrastructure.logging import get_logger
from subset_controller.ports.outbound import SubsetControlPort

logger = get_logger(__name__)


class SubsetDeleter:
    """Deletes subsets sequentially, attempting every one.

    Failures never short-circuit: each delete is attempted and every
    failure is collected and returned to the caller.
    """

    def __init__(self, controls: Mapping[SubsetType, SubsetControlPort]):
        """Initialize the deleter.

        Args:
            controls: Subset control per subset type.
        """
        self._controls = controls

    def delete_all(
        self,
        names: Iterable[str],
        lookup: Mapping[str, Subset],
        subset_type: SubsetType,
    ) -> list[SubsetDeletionError]:
        """Delete the named subsets of the active type.

        Args:
            names: Logical subset names to delete.
            lookup: Observed subsets by logical name.
            subset_type: Type whose control performs the deletes.

        Returns:
            Collected deletion errors, empty on full success.
        """
        control = self._controls[subset_type]
        errors: list[SubsetDeletionError] = []
        for subset_name in names:
            subset = lookup[subset_name]
            try:
                control.delete_subset(subset)
            except Exception as e:
                errors.append(SubsetDeletionError(
                    f"fail to delete Subset ({subset_type}) {subset.namespace}/{subset.name} "
                    f"for {subset_name}: {e}",
                    cause=e,
                ))
        return errors

    def cleanup_foreign_types(
        self,
        owner: SubsetDeployment,
        active_type: SubsetType,
    ) -> list[Exception]:
        """Delete every subset of ``owner`` whose type is not the active one.

        Types are visited in declaration order. A failed listing skips that
        type; a failed delete does not stop the remaining ones.

        Args:
            owner: Owning deployment.
            active_type: The only type allowed to keep subsets.

        Returns:
            Collected listing and deletion errors.
        """
        errors: list[Exception] = []
        for subset_type in SubsetType:
            if subset_type == active_type or subset_type not in self._controls:
                continue
            control = self._controls[subset_type]

            try:
                subsets = control.get_all_subsets(owner)
            except Exception as e:
                errors.append(SubsetListError(
                    f"fail to list Subset of other type {subset_type} for "
                    f"SubsetDeployment {owner.key}: {e}",
                    cause=e,
                ))
                continue

            for subset in subsets:
                try:
                    control.delete_subset(subset)
                except Exception as e:
                    errors.append(SubsetDeletionError(
                        f"fail to delete Subset {subset.name} of other type {subset_type} "
                        f"for SubsetDeployment {owner.key}: {e}",
                        cause=e,
                    ))
                    continue
                logger.info(
                    "foreign_subset_deleted",
                    deployment=owner.key,
                    subset=subset.name,
                    subset_type=str(subset_type),
                )
        return errors
