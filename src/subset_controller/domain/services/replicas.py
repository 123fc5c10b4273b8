"""Replica quantity resolution.

A subset may declare its size as an absolute replica count or as a
percentage of the deployment's total replicas. Percentages are rounded
half up: ``floor(total * percent / 100 + 0.5)``.
"""

from __future__ import annotations

import re
from typing import Iterable

from subset_controller.domain.entities.subset import ReplicaQuantity, SubsetSpec
from subset_controller.domain.services.error_aggregator import aggregate_errors

_PERCENT_RE = re.compile(r"[+-]?[0-9]+")


class QuantityError(ValueError):
    """Base class for replica quantity resolution failures."""


class InvalidQuantityError(QuantityError):
    """Quantity is well-formed but out of its allowed range."""


class MalformedPercentageError(QuantityError):
    """Quantity string is not an integer percentage."""


def parse_subset_replicas(total: int, quantity: ReplicaQuantity) -> int:
    """Resolve a subset replica quantity against the total replicas.

    Args:
        total: Total replicas of the deployment (>= 0).
        quantity: Absolute count or percentage string ending in ``%``.

    Returns:
        Resolved replica count.

    Raises:
        InvalidQuantityError: Negative count or percentage outside [0, 100].
        MalformedPercentageError: String is not ``<integer>%``.
    """
    if isinstance(quantity, bool):
        raise MalformedPercentageError(f"subset replicas ({quantity}) is not a quantity")

    if isinstance(quantity, int):
        if quantity < 0:
            raise InvalidQuantityError(
                f"subset replicas ({quantity}) should not be less than 0"
            )
        return quantity

    if not isinstance(quantity, str) or not quantity.endswith("%"):
        raise MalformedPercentageError(
            f"subset replicas ({quantity}) only support integer value "
            f"or percentage value with a suffix '%'"
        )

    int_part = quantity[:-1]
    if not _PERCENT_RE.fullmatch(int_part):
        raise MalformedPercentageError(
            f"subset replicas ({quantity}) should be correct percentage integer"
        )

    percent = int(int_part)
    if percent < 0 or percent > 100:
        raise InvalidQuantityError(
            f"subset replicas ({quantity}) should be in range [0, 100]"
        )

    # Integer form of floor(total * percent / 100 + 0.5)
    return (2 * total * percent + 100) // 200


def resolve_topology_replicas(total: int, subsets: Iterable[SubsetSpec]) -> dict[str, int]:
    """Resolve every subset that declares a replica quantity.

    Subsets without a declared quantity are left out.

    Args:
        total: Total replicas of the deployment.
        subsets: Desired topology entries.

    Returns:
        Mapping of subset name to resolved replicas.

    Raises:
        AggregateError: One entry per subset whose quantity failed to resolve.
    """
    resolved: dict[str, int] = {}
    errors: list[Exception] = []
    for spec in subsets:
        if spec.replicas is None:
            continue
        try:
            resolved[spec.name] = parse_subset_replicas(total, spec.replicas)
        except QuantityError as e:
            errors.append(e)

    aggregate = aggregate_errors(errors)
    if aggregate is not None:
        raise aggregate
    return resolved
