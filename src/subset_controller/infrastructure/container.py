"""Dependency injection container for the subset controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Mapping, Optional

import structlog
from opentelemetry import trace

from subset_controller.adapters.outbound import RecordingEventRecorder, create_in_memory_controls
from subset_controller.application.provisioner import SubsetProvisioner
from subset_controller.domain.entities.subset import SubsetType
from subset_controller.infrastructure.config import Config, get_config
from subset_controller.infrastructure.logging import get_logger, setup_logging
from subset_controller.infrastructure.metrics import MetricsRegistry, get_metrics, start_metrics_server
from subset_controller.infrastructure.tracing import setup_tracing
from subset_controller.ports.outbound import EventRecorderPort, SubsetControlPort


@dataclass
class Container:
    """Dependency injection container for subset controller components."""

    config: Config
    logger: structlog.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry
    controls: Mapping[SubsetType, SubsetControlPort]
    recorder: EventRecorderPort
    provisioner: SubsetProvisioner

    _instance: ClassVar[Optional["Container"]] = None

    @classmethod
    def create(
        cls,
        config: Optional[Config] = None,
        controls: Optional[Mapping[SubsetType, SubsetControlPort]] = None,
        recorder: Optional[EventRecorderPort] = None,
        metrics: Optional[MetricsRegistry] = None,
    ) -> "Container":
        """Create and initialize the container with all dependencies.

        Subset controls and the event recorder default to the in-memory
        adapters.
        """
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        setup_logging(config.observability.log_level, config.observability.log_format)
        logger = get_logger("subset_controller")
        tracer = setup_tracing(
            service_name=config.observability.otel_service_name,
            otlp_endpoint=config.observability.otel_endpoint,
        )
        metrics = metrics or get_metrics()
        controls = controls if controls is not None else create_in_memory_controls()
        recorder = recorder or RecordingEventRecorder()

        provisioner = SubsetProvisioner(
            controls,
            recorder,
            initial_batch_size=config.provision.slow_start_initial_batch_size,
            metrics=metrics,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            controls=controls,
            recorder=recorder,
            provisioner=provisioner,
        )

        logger.info(
            "subset_controller_container_initialized",
            subset_types=[str(t) for t in controls],
            active_subset_type=str(config.provision.active_subset_type),
        )
        return cls._instance

    def serve_metrics(self) -> None:
        """Expose the metrics registry on the configured host and port."""
        server = self.config.server
        start_metrics_server(self.metrics, server.metrics_port, server.host)
        self.logger.info("metrics_server_started", host=server.host, port=server.metrics_port)

    @classmethod
    def get(cls) -> "Container":
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
