"""Subset provisioning coordinator.

Composes the domain services into one provisioning pass:

    plan -> select revision -> create (slow start) -> delete
         -> clean up foreign subset types -> aggregate errors

A pass is stateless. Re-running it against an unchanged cluster
issues no creates and no deletes.
"""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Mapping, Optional

from subset_controller.domain.entities.deployment import (
    ReconcileResult,
    RevisionPair,
    SubsetDeployment,
)
from subset_controller.domain.entities.subset import Subset, SubsetType
from subset_controller.domain.services.diff_planner import expected_subset_names, plan_subsets
from subset_controller.domain.services.error_aggregator import aggregate_errors
from subset_controller.domain.services.provision_errors import (
    SubsetCreationError,
    UnknownSubsetTypeError,
)
from subset_controller.domain.services.revision import select_from_pair
from subset_controller.domain.services.slow_start import SlowStartBatcher
from subset_controller.domain.services.subset_deleter import SubsetDeleter
from subset_controller.infrastructure.logging import get_logger, reconcile_log_context
from subset_controller.infrastructure.metrics import MetricsRegistry
from subset_controller.infrastructure.tracing import record_pass_outcome, trace_span
from subset_controller.ports.outbound import (
    EVENT_TYPE_NORMAL,
    EventRecorderPort,
    SubsetControlPort,
    is_timeout_error,
)

logger = get_logger(__name__)

EVENT_REASON_SUBSETS_UPDATE = "SubsetsUpdate"
SLOW_START_INITIAL_BATCH_SIZE = 1


class SubsetProvisioner:
    """Creates and deletes subsets so the cluster matches the topology.

    Implements SubsetProvisionerPort.
    """

    def __init__(
        self,
        controls: Mapping[SubsetType, SubsetControlPort],
        recorder: EventRecorderPort,
        initial_batch_size: int = SLOW_START_INITIAL_BATCH_SIZE,
        metrics: Optional[MetricsRegistry] = None,
    ) -> None:
        """Initialize the provisioner.

        Args:
            controls: Subset control per subset type.
            recorder: Event recorder for success events.
            initial_batch_size: First slow-start round size.
            metrics: Optional metrics registry.
        """
        self._controls = controls
        self._recorder = recorder
        self._batcher = SlowStartBatcher(initial_batch_size)
        self._deleter = SubsetDeleter(controls)
        self._metrics = metrics

    def manage_subset_provision(
        self,
        deployment: SubsetDeployment,
        name_to_subset: Mapping[str, Subset],
        next_replicas: Mapping[str, int],
        next_partitions: Mapping[str, int],
        revisions: RevisionPair,
        subset_type: SubsetType,
    ) -> ReconcileResult:
        """Run one provisioning pass for a deployment.

        Missing subsets are created in slow-start rounds, stale ones are
        deleted, and subsets of every other type are cleaned up. Each
        phase runs even when an earlier one failed.

        Args:
            deployment: Desired object.
            name_to_subset: Observed subsets of the active type by subset name.
            next_replicas: Allocated replicas per subset name, read only.
            next_partitions: Allocated partition per subset name, read only.
            revisions: Current and updated revision.
            subset_type: Active subset type.

        Returns:
            Names kept from ``name_to_subset`` and the aggregated error.

        Raises:
            UnknownSubsetTypeError: If no control handles ``subset_type``.
        """
        if subset_type not in self._controls:
            raise UnknownSubsetTypeError(f"no subset control for type {subset_type}")

        # Allocations belong to the caller
        next_replicas = MappingProxyType(dict(next_replicas))
        next_partitions = MappingProxyType(dict(next_partitions))

        started = time.perf_counter()
        with reconcile_log_context(deployment.key, str(subset_type)), trace_span(
            "manage_subset_provision",
            {"deployment": deployment.key, "subset_type": str(subset_type)},
        ) as span:
            expected = expected_subset_names(deployment.topology.subsets)
            plan = plan_subsets(expected, set(name_to_subset))
            logger.debug(
                "subsets_observed",
                got=sorted(name_to_subset),
                expected=sorted(expected),
            )

            errors: list[Exception] = []

            if plan.creates:
                logger.info("subsets_need_creating", creates=list(plan.creates))
                revision = select_from_pair(revisions).name
                created, create_error = self._create_subsets(
                    deployment, list(plan.creates), revision,
                    next_replicas, next_partitions, subset_type,
                )
                if create_error is None:
                    self._recorder.event(
                        deployment, EVENT_TYPE_NORMAL, f"Successful{EVENT_REASON_SUBSETS_UPDATE}",
                        f"Create {created} Subset ({subset_type})",
                    )
                else:
                    errors.append(create_error)

            if plan.deletes:
                logger.info("subsets_need_deleting", deletes=list(plan.deletes))
                delete_errors = self._deleter.delete_all(plan.deletes, name_to_subset, subset_type)
                self._count("delete", subset_type, len(plan.deletes), len(delete_errors))
                if delete_errors:
                    errors.extend(delete_errors)
                else:
                    self._recorder.event(
                        deployment, EVENT_TYPE_NORMAL, f"Successful{EVENT_REASON_SUBSETS_UPDATE}",
                        f"Delete {len(plan.deletes)} Subset ({subset_type})",
                    )

            errors.extend(self._deleter.cleanup_foreign_types(deployment, subset_type))

            aggregate = aggregate_errors(errors)
            record_pass_outcome(span, len(plan.creates), len(plan.deletes), aggregate)
            if aggregate is not None:
                logger.warning("subset_provision_failed", errors=len(aggregate), error=str(aggregate))

        self._observe_pass(plan.retained, aggregate, time.perf_counter() - started)
        return ReconcileResult(retained=plan.retained, error=aggregate)

    def _create_subsets(
        self,
        deployment: SubsetDeployment,
        creates: list[str],
        revision: str,
        next_replicas: Mapping[str, int],
        next_partitions: Mapping[str, int],
        subset_type: SubsetType,
    ) -> tuple[int, Optional[Exception]]:
        control = self._controls[subset_type]

        def create(index: int) -> None:
            subset_name = creates[index]
            try:
                control.create_subset(
                    deployment,
                    subset_name,
                    revision,
                    next_replicas.get(subset_name, 0),
                    next_partitions.get(subset_name, 0),
                )
            except Exception as e:
                if is_timeout_error(e):
                    # May have been created server side; the next pass re-diffs
                    logger.info("subset_create_timed_out", subset=subset_name)
                    self._count("create", subset_type, 1, 0, status="timeout")
                    return
                self._count("create", subset_type, 1, 1)
                raise SubsetCreationError(
                    f"fail to create Subset ({subset_type}) {subset_name}: {e}", cause=e
                ) from e
            self._count("create", subset_type, 1, 0)

        result = self._batcher.run(len(creates), create)
        if self._metrics:
            for size in result.batch_sizes:
                self._metrics.slow_start_batch_size.observe(size)
        return result.successes, result.error

    def _count(
        self,
        operation: str,
        subset_type: SubsetType,
        total: int,
        failed: int,
        status: str = "success",
    ) -> None:
        if not self._metrics:
            return
        counter = self._metrics.subset_operations_total
        if total - failed:
            counter.labels(operation=operation, subset_type=str(subset_type), status=status).inc(total - failed)
        if failed:
            counter.labels(operation=operation, subset_type=str(subset_type), status="error").inc(failed)

    def _observe_pass(
        self,
        retained: frozenset[str],
        error: Optional[Exception],
        duration: float,
    ) -> None:
        if not self._metrics:
            return
        self._metrics.reconcile_passes_total.labels(result="success" if error is None else "error").inc()
        self._metrics.reconcile_duration_seconds.observe(duration)
        self._metrics.subsets_retained.set(len(retained))
