"""
Deployment runtime settings.

Settings that control how a run is executed rather than what is deployed.
Loaded from PLATFORM_* environment variables or a .env file.

Dependencies: pydantic_settings
System role: Orchestrator and logging configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeploymentSettings(BaseSettings):
    """Runtime settings for a deployment run."""

    model_config = SettingsConfigDict(
        env_prefix="PLATFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parallel: bool = Field(
        default=False,
        description="Deploy independent managers concurrently",
    )
    fail_fast: bool = Field(
        default=False,
        description="Skip every manager not yet started after the first failure",
    )
    forward_logs_to_pulumi: bool = Field(
        default=True,
        description="Send log records to the Pulumi engine log",
    )
