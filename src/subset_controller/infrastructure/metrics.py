"""Prometheus metrics for the subset controller."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all subset controller metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Subset operations
        self.subset_operations_total = Counter(
            "subset_operations_total",
            "Total subset control operations",
            ["operation", "subset_type", "status"],  # create/delete, success/error/timeout
            registry=self._registry,
        )

        self.slow_start_batch_size = Histogram(
            "slow_start_batch_size",
            "Size of each slow-start creation round",
            buckets=(1, 2, 4, 8, 16, 32, 64, 128, 256),
            registry=self._registry,
        )

        # Reconcile passes
        self.reconcile_passes_total = Counter(
            "reconcile_passes_total",
            "Total provisioning passes",
            ["result"],  # success, error
            registry=self._registry,
        )

        self.reconcile_duration_seconds = Histogram(
            "reconcile_duration_seconds",
            "Provisioning pass latency in seconds",
            buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
            registry=self._registry,
        )

        self.subsets_retained = Gauge(
            "subsets_retained",
            "Subsets kept by the last provisioning pass",
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "subset_controller",
            "Subset controller information",
            registry=self._registry,
        )


_metrics: MetricsRegistry | None = None


def start_metrics_server(metrics: MetricsRegistry, port: int = 8003, addr: str = "0.0.0.0") -> None:
    """Publish build info and serve a registry over HTTP."""
    from subset_controller import __version__
    metrics.info.info({"version": __version__})

    start_http_server(port, addr=addr, registry=metrics._registry)


def setup_metrics(
    port: int = 8003,
    addr: str = "0.0.0.0",
    registry: CollectorRegistry | None = None,
) -> MetricsRegistry:
    """Set up Prometheus metrics server."""
    global _metrics
    _metrics = MetricsRegistry(registry)
    start_metrics_server(_metrics, port, addr)
    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
