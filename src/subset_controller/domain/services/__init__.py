"""Domain services for subset reconciliation.

Services implement the pieces of one provisioning pass:
- parse_subset_replicas: absolute or percentage replica resolution
- plan_subsets: desired vs. observed subset diff
- SlowStartBatcher: ramped-up concurrent creation
- SubsetDeleter: best-effort deletion and cross-type cleanup
- select_revision: revision stamped onto new subsets
- aggregate_errors: merged per-pass error
"""

from subset_controller.domain.services.diff_planner import (
    SubsetPlan,
    expected_subset_names,
    plan_subsets,
)
from subset_controller.domain.services.error_aggregator import (
    AggregateError,
    aggregate_errors,
)
from subset_controller.domain.services.provision_errors import (
    SubsetCreationError,
    SubsetDeletionError,
    SubsetListError,
    SubsetProvisionError,
    UnknownSubsetTypeError,
)
from subset_controller.domain.services.replicas import (
    InvalidQuantityError,
    MalformedPercentageError,
    QuantityError,
    parse_subset_replicas,
    resolve_topology_replicas,
)
from subset_controller.domain.services.revision import select_from_pair, select_revision
from subset_controller.domain.services.slow_start import (
    SlowStartBatcher,
    SlowStartResult,
    slow_start_batch,
)
from subset_controller.domain.services.subset_deleter import SubsetDeleter

__all__ = [
    "SubsetPlan",
    "expected_subset_names",
    "plan_subsets",
    "AggregateError",
    "aggregate_errors",
    "SubsetCreationError",
    "SubsetDeletionError",
    "SubsetListError",
    "SubsetProvisionError",
    "UnknownSubsetTypeError",
    "InvalidQuantityError",
    "MalformedPercentageError",
    "QuantityError",
    "parse_subset_replicas",
    "resolve_topology_replicas",
    "select_from_pair",
    "select_revision",
    "SlowStartBatcher",
    "SlowStartResult",
    "slow_start_batch",
    "SubsetDeleter",
]
