"""Domain value objects for the subset controller.

Value objects are immutable values without identity: subset names,
object keys, and the well-known labels used to recover them.
"""

from subset_controller.domain.value_objects.identifiers import (
    ObjectKey,
    RevisionName,
    SubsetName,
    create_object_key,
    get_subset_prefix,
    is_dns_subdomain,
)
from subset_controller.domain.value_objects.labels import (
    CONTROLLER_REVISION_HASH_LABEL_KEY,
    SUBSET_NAME_LABEL_KEY,
    MissingNameLabelError,
    revision_from_labels,
    subset_name_from_labels,
)

__all__ = [
    "ObjectKey",
    "RevisionName",
    "SubsetName",
    "create_object_key",
    "get_subset_prefix",
    "is_dns_subdomain",
    "CONTROLLER_REVISION_HASH_LABEL_KEY",
    "SUBSET_NAME_LABEL_KEY",
    "MissingNameLabelError",
    "revision_from_labels",
    "subset_name_from_labels",
]
