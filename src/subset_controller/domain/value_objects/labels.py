"""Well-known labels carried by subset workload objects."""

from __future__ import annotations

from typing import Mapping, Optional

from subset_controller.domain.value_objects.identifiers import SubsetName

SUBSET_NAME_LABEL_KEY = "apps.kruise.io/subset-name"
CONTROLLER_REVISION_HASH_LABEL_KEY = "apps.kruise.io/controller-revision-hash"


class MissingNameLabelError(Exception):
    """Raised when a workload object carries no usable subset name label."""

    def __init__(self, namespace: str, name: str, reason: str) -> None:
        super().__init__(
            f"fail to get subSet name from label of subset {namespace}/{name}: {reason}"
        )
        self.namespace = namespace
        self.name = name


def subset_name_from_labels(
    labels: Optional[Mapping[str, str]],
    namespace: str,
    name: str,
) -> SubsetName:
    """Recover the logical subset name of a workload object.

    Args:
        labels: Object labels.
        namespace: Object namespace, used in the error message.
        name: Object name, used in the error message.

    Returns:
        The subset name.

    Raises:
        MissingNameLabelError: If the label is absent or empty.
    """
    labels = labels or {}
    if SUBSET_NAME_LABEL_KEY not in labels:
        raise MissingNameLabelError(
            namespace, name, f"no label {SUBSET_NAME_LABEL_KEY} found"
        )

    value = labels[SUBSET_NAME_LABEL_KEY]
    if not value:
        raise MissingNameLabelError(
            namespace, name, f"label {SUBSET_NAME_LABEL_KEY} has an empty value"
        )
    return SubsetName(value)


def revision_from_labels(labels: Optional[Mapping[str, str]]) -> str:
    """Return the applied revision hash, or an empty string if unlabelled."""
    if not labels:
        return ""
    return labels.get(CONTROLLER_REVISION_HASH_LABEL_KEY, "")
