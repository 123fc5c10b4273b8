"""Rollout revision selection."""

from __future__ import annotations

from typing import Optional

from subset_controller.domain.entities.deployment import Revision, RevisionPair


def select_revision(current: Revision, updated: Optional[Revision] = None) -> Revision:
    """Pick the revision stamped onto subsets created in this pass.

    Returns the updated revision when one exists, the current one otherwise.
    """
    if updated is not None:
        return updated
    return current


def select_from_pair(revisions: RevisionPair) -> Revision:
    """Pick the creation revision of a revision pair."""
    return select_revision(revisions.current, revisions.updated)
