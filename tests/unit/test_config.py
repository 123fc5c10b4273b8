"""Unit tests for subset controller configuration."""

import pytest
from pydantic import ValidationError

from subset_controller.domain.entities import SubsetType
from subset_controller.infrastructure.config import (
    Config,
    ObservabilityConfig,
    ProvisionConfig,
    ServerConfig,
)


@pytest.mark.unit
class TestProvisionConfig:
    """Tests for ProvisionConfig."""

    def test_default_values(self):
        """Test default provisioning configuration."""
        config = ProvisionConfig()
        assert config.slow_start_initial_batch_size == 1
        assert config.update_retries == 5
        assert config.active_subset_type == SubsetType.STATEFUL_SET

    def test_rejects_zero_batch_size(self):
        """A slow-start run needs at least one call per round."""
        with pytest.raises(ValidationError):
            ProvisionConfig(slow_start_initial_batch_size=0)

    def test_subset_type_from_value(self):
        """Subset type is parsed from its workload kind."""
        config = ProvisionConfig(active_subset_type="Deployment")
        assert config.active_subset_type == SubsetType.DEPLOYMENT


@pytest.mark.unit
class TestServerConfig:
    """Tests for ServerConfig."""

    def test_default_values(self):
        """Test default server configuration."""
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.metrics_port == 8003

    def test_invalid_port(self):
        """Test out-of-range port."""
        with pytest.raises(ValidationError):
            ServerConfig(metrics_port=70000)


@pytest.mark.unit
class TestObservabilityConfig:
    """Tests for ObservabilityConfig."""

    def test_default_values(self):
        """Test default observability configuration."""
        config = ObservabilityConfig()
        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.otel_endpoint is None
        assert config.otel_service_name == "subset_controller"


@pytest.mark.unit
class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Test default configuration."""
        config = Config()
        assert isinstance(config.provision, ProvisionConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.observability, ObservabilityConfig)

    def test_env_override(self, monkeypatch):
        """Nested settings are read from prefixed environment variables."""
        monkeypatch.setenv("SUBSET_CONTROLLER_PROVISION__SLOW_START_INITIAL_BATCH_SIZE", "4")
        monkeypatch.setenv("SUBSET_CONTROLLER_PROVISION__ACTIVE_SUBSET_TYPE", "CloneSet")
        config = Config()
        assert config.provision.slow_start_initial_batch_size == 4
        assert config.provision.active_subset_type == SubsetType.CLONE_SET
