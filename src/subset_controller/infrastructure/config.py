"""Configuration management for the subset controller."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from subset_controller.domain.entities.subset import SubsetType


class ProvisionConfig(BaseModel):
    """Subset provisioning configuration."""

    slow_start_initial_batch_size: int = Field(
        default=1, ge=1, description="Size of the first slow-start creation round"
    )
    update_retries: int = Field(
        default=5, ge=0, description="Bounded conflict retries for subset control updates"
    )
    active_subset_type: SubsetType = Field(
        default=SubsetType.STATEFUL_SET, description="Workload kind backing new subsets"
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    metrics_port: int = Field(default=8003, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    otel_endpoint: str | None = Field(default=None)
    otel_service_name: str = Field(default="subset_controller")


class Config(BaseSettings):
    """Main configuration for the subset controller."""

    model_config = SettingsConfigDict(
        env_prefix="SUBSET_CONTROLLER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    provision: ProvisionConfig = Field(default_factory=ProvisionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
