"""Pytest configuration and fixtures for subset_controller tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from subset_controller.adapters.outbound import (
    InMemorySubsetControl,
    RecordingEventRecorder,
    create_in_memory_controls,
)
from subset_controller.application.provisioner import SubsetProvisioner
from subset_controller.domain.entities import (
    Revision,
    RevisionPair,
    SubsetDeployment,
    SubsetSpec,
    SubsetType,
    Topology,
)
from subset_controller.infrastructure.config import Config
from subset_controller.infrastructure.container import Container
from subset_controller.infrastructure.metrics import MetricsRegistry


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Reset the DI container before and after each test."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry."""
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def controls() -> dict[SubsetType, InMemorySubsetControl]:
    """Provide one in-memory subset control per type."""
    return create_in_memory_controls(seed=7)


@pytest.fixture
def recorder() -> RecordingEventRecorder:
    """Provide an in-memory event recorder."""
    return RecordingEventRecorder()


@pytest.fixture
def provisioner(
    controls: dict[SubsetType, InMemorySubsetControl],
    recorder: RecordingEventRecorder,
    metrics_registry: MetricsRegistry,
) -> SubsetProvisioner:
    """Provide a provisioner wired to in-memory controls."""
    return SubsetProvisioner(controls, recorder, metrics=metrics_registry)


@pytest.fixture
def deployment() -> SubsetDeployment:
    """Provide a deployment with three subsets."""
    return SubsetDeployment(
        name="web",
        namespace="prod",
        uid="uid-web",
        replicas=10,
        topology=Topology(subsets=[
            SubsetSpec(name="a", replicas="50%"),
            SubsetSpec(name="b", replicas=3),
            SubsetSpec(name="c"),
        ]),
    )


@pytest.fixture
def revisions() -> RevisionPair:
    """Provide a revision pair without an update."""
    return RevisionPair(current=Revision(name="web-rev-1", revision=1))


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-style exhaustive tests")
