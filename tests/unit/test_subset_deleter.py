"""Unit tests for subset deletion and cross-type cleanup."""

import pytest

from subset_controller.adapters.outbound import WorkloadObject
from subset_controller.domain.entities import SubsetDeployment, SubsetType
from subset_controller.domain.services import (
    SubsetDeleter,
    SubsetDeletionError,
    SubsetListError,
)
from subset_controller.domain.value_objects import SUBSET_NAME_LABEL_KEY, MissingNameLabelError
from subset_controller.ports.outbound import SubsetControlError


def _seed(control, deployment, *subset_names):
    for name in subset_names:
        control.create_subset(deployment, name, "rev-1", 1, 0)
    return {s.subset_name: s for s in control.get_all_subsets(deployment)}


@pytest.mark.unit
class TestDeleteAll:
    """Test best-effort deletion of the active type."""

    def test_deletes_every_name(self, controls, deployment):
        """All named subsets are deleted."""
        control = controls[SubsetType.STATEFUL_SET]
        lookup = _seed(control, deployment, "a", "b", "c")

        errors = SubsetDeleter(controls).delete_all(["a", "c"], lookup, SubsetType.STATEFUL_SET)

        assert errors == []
        assert [s.subset_name for s in control.get_all_subsets(deployment)] == ["b"]

    def test_continues_after_failure(self, controls, deployment):
        """A failed delete does not stop the following ones."""
        control = controls[SubsetType.STATEFUL_SET]
        lookup = _seed(control, deployment, "a", "b", "c")
        control.delete_failures[lookup["a"].name] = SubsetControlError("forbidden")
        control.delete_failures[lookup["b"].name] = SubsetControlError("conflict")

        errors = SubsetDeleter(controls).delete_all(["a", "b", "c"], lookup, SubsetType.STATEFUL_SET)

        assert len(errors) == 2
        assert all(isinstance(e, SubsetDeletionError) for e in errors)
        assert "forbidden" in str(errors[0])
        assert isinstance(errors[0].__cause__, SubsetControlError)
        assert len(control.delete_calls) == 3
        assert {s.subset_name for s in control.get_all_subsets(deployment)} == {"a", "b"}


@pytest.mark.unit
class TestCleanupForeignTypes:
    """Test removal of subsets of non-active types."""

    def test_removes_other_types_only(self, controls, deployment):
        """Every foreign subset is deleted and the active type is untouched."""
        _seed(controls[SubsetType.STATEFUL_SET], deployment, "a")
        _seed(controls[SubsetType.DEPLOYMENT], deployment, "a", "b")
        _seed(controls[SubsetType.CLONE_SET], deployment, "c")

        errors = SubsetDeleter(controls).cleanup_foreign_types(deployment, SubsetType.STATEFUL_SET)

        assert errors == []
        assert controls[SubsetType.STATEFUL_SET].object_count() == 1
        assert controls[SubsetType.DEPLOYMENT].object_count() == 0
        assert controls[SubsetType.CLONE_SET].object_count() == 0

    def test_listing_failure_skips_type(self, controls, deployment):
        """A failed listing is reported and the other types are still cleaned."""
        _seed(controls[SubsetType.DEPLOYMENT], deployment, "a")
        controls[SubsetType.CLONE_SET].fail_list = SubsetControlError("unavailable")

        errors = SubsetDeleter(controls).cleanup_foreign_types(deployment, SubsetType.STATEFUL_SET)

        assert len(errors) == 1
        assert isinstance(errors[0], SubsetListError)
        assert "CloneSet" in str(errors[0])
        assert controls[SubsetType.DEPLOYMENT].object_count() == 0

    def test_missing_name_label_fails_listing(self, controls, deployment):
        """An unlabelled object fails the whole listing of its type."""
        control = controls[SubsetType.DEPLOYMENT]
        _seed(control, deployment, "a")
        control.put_object(WorkloadObject(
            name="web-orphan",
            namespace=deployment.namespace,
            owner_uid=deployment.uid,
            labels={SUBSET_NAME_LABEL_KEY: ""},
        ))

        errors = SubsetDeleter(controls).cleanup_foreign_types(deployment, SubsetType.STATEFUL_SET)

        assert len(errors) == 1
        assert isinstance(errors[0].__cause__, MissingNameLabelError)
        assert control.object_count() == 2
        assert control.delete_calls == []

    def test_delete_failure_continues(self, controls, deployment):
        """A failed foreign delete does not block the rest."""
        control = controls[SubsetType.ADVANCED_STATEFUL_SET]
        lookup = _seed(control, deployment, "a", "b")
        control.delete_failures[lookup["a"].name] = SubsetControlError("conflict")

        errors = SubsetDeleter(controls).cleanup_foreign_types(deployment, SubsetType.STATEFUL_SET)

        assert len(errors) == 1
        assert isinstance(errors[0], SubsetDeletionError)
        assert [s.subset_name for s in control.get_all_subsets(deployment)] == ["a"]

    def test_other_owners_untouched(self, controls, deployment):
        """Subsets owned by another deployment are left alone."""
        other = SubsetDeployment(name="api", namespace=deployment.namespace, uid="uid-api")
        _seed(controls[SubsetType.DEPLOYMENT], other, "a")

        errors = SubsetDeleter(controls).cleanup_foreign_types(deployment, SubsetType.STATEFUL_SET)

        assert errors == []
        assert controls[SubsetType.DEPLOYMENT].object_count() == 1
