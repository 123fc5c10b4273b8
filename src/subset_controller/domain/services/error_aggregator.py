"""Error aggregation across independent reconcile phases."""

from __future__ import annotations

from typing import Iterable, Optional


class AggregateError(Exception):
    """Combines errors collected from independent operations.

    An aggregate is never empty: use ``aggregate_errors`` which returns
    None when there is nothing to report.
    """

    def __init__(self, errors: list[BaseException]) -> None:
        if not errors:
            raise ValueError("AggregateError requires at least one error")
        self.errors = list(errors)
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return "[" + ", ".join(str(e) for e in self.errors) + "]"

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def matches(self, error_type: type[BaseException]) -> bool:
        """Check whether any aggregated error is of the given type."""
        return any(isinstance(e, error_type) for e in self.flatten())

    def flatten(self) -> list[BaseException]:
        """Return the leaf errors, expanding nested aggregates."""
        leaves: list[BaseException] = []
        for error in self.errors:
            if isinstance(error, AggregateError):
                leaves.extend(error.flatten())
            else:
                leaves.append(error)
        return leaves


def aggregate_errors(errors: Iterable[Optional[BaseException]]) -> Optional[AggregateError]:
    """Merge errors into one aggregate.

    Args:
        errors: Collected errors; None entries are ignored.

    Returns:
        The aggregate, or None if no errors remain.
    """
    collected = [e for e in errors if e is not None]
    if not collected:
        return None
    return AggregateError(collected)
