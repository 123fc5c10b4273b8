"""Desired vs. observed subset diffing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable

from subset_controller.domain.entities.subset import SubsetSpec
from subset_controller.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubsetPlan:
    """Subsets to create and delete, and the ones to keep."""
    creates: tuple[str, ...]
    deletes: tuple[str, ...]
    retained: frozenset[str]

    @property
    def is_noop(self) -> bool:
        return not self.creates and not self.deletes


def expected_subset_names(subsets: Iterable[SubsetSpec]) -> frozenset[str]:
    """Collect the subset names of a desired topology.

    Duplicate names collapse into one entry.
    """
    names: set[str] = set()
    duplicates: set[str] = set()
    for spec in subsets:
        if spec.name in names:
            duplicates.add(spec.name)
        names.add(spec.name)

    if duplicates:
        logger.warning("duplicate_subset_names", names=sorted(duplicates))
    return frozenset(names)


def plan_subsets(expected: AbstractSet[str], actual: AbstractSet[str]) -> SubsetPlan:
    """Diff expected subset names against the observed ones.

    Args:
        expected: Names declared in the topology.
        actual: Names of subsets found in the cluster.

    Returns:
        Plan with lexicographically sorted creates and deletes.
    """
    return SubsetPlan(
        creates=tuple(sorted(set(expected) - set(actual))),
        deletes=tuple(sorted(set(actual) - set(expected))),
        retained=frozenset(expected) & frozenset(actual),
    )
