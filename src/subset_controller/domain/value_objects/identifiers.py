"""Subset controller value objects."""

from __future__ import annotations

import re
from typing import NewType

# Type-safe identifiers
SubsetName = NewType('SubsetName', str)
RevisionName = NewType('RevisionName', str)
ObjectKey = NewType('ObjectKey', str)

DNS1123_SUBDOMAIN_MAX_LENGTH = 253

_DNS1123_LABEL = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_SUBDOMAIN_RE = re.compile(rf"{_DNS1123_LABEL}(\.{_DNS1123_LABEL})*")


def create_object_key(namespace: str, name: str) -> ObjectKey:
    """Create a namespaced object key.

    Args:
        namespace: Object namespace.
        name: Object name.

    Returns:
        Key in ``namespace/name`` form.
    """
    return ObjectKey(f"{namespace}/{name}")


def is_dns_subdomain(name: str, prefix: bool = False) -> bool:
    """Check whether a name is a valid DNS-1123 subdomain.

    When ``prefix`` is set the name is meant to be completed by a
    generated suffix, so a trailing dash is accepted.

    Args:
        name: Candidate name.
        prefix: Validate as a generate-name prefix.

    Returns:
        True if valid.
    """
    if prefix and len(name) > 1 and name.endswith("-"):
        name = name[:-2] + "a"
    if len(name) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        return False
    return bool(_DNS1123_SUBDOMAIN_RE.fullmatch(name))


def get_subset_prefix(owner_name: str, subset_name: str) -> str:
    """Build the generate-name prefix for a subset workload object.

    Args:
        owner_name: Name of the owning deployment.
        subset_name: Logical subset name.

    Returns:
        ``<owner>-<subset>-`` or ``<owner>-`` when the former is not
        a valid DNS subdomain prefix.
    """
    prefix = f"{owner_name}-{subset_name}-"
    if not is_dns_subdomain(prefix, prefix=True):
        prefix = f"{owner_name}-"
    return prefix
