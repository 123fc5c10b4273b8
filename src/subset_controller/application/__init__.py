"""Application layer - provisioning pass coordination."""

from subset_controller.application.provisioner import (
    EVENT_REASON_SUBSETS_UPDATE,
    SLOW_START_INITIAL_BATCH_SIZE,
    SubsetProvisioner,
)

__all__ = [
    "EVENT_REASON_SUBSETS_UPDATE",
    "SLOW_START_INITIAL_BATCH_SIZE",
    "SubsetProvisioner",
]
