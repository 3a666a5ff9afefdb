"""
Configuration models for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.

Dependencies: pydantic
System role: Read-only settings shared by every service manager
"""

from pydantic import BaseModel, ConfigDict, Field

from platform_infra.configs.constants import (
    DEFAULT_FAILOVER_REGION,
    DEFAULT_PRIMARY_REGION,
    PRODUCTION_STACK,
)


class ConfigModel(BaseModel):
    """Immutable base for all configuration models."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ServiceAccountDefinition(ConfigModel):
    """A service account requested by the security configuration."""

    name: str = Field(description="Short account name, suffixed with '-sa' on creation")
    description: str = Field(default="", description="Human readable purpose")


class Regions(ConfigModel):
    """Primary and failover regions."""

    primary: str = DEFAULT_PRIMARY_REGION
    failover: str = DEFAULT_FAILOVER_REGION


class ProjectConfig(ConfigModel):
    """
    Project-level configuration.

    Attributes:
        name: Project display name
        environments: Stack names this project is deployed to
        regions: Primary and failover regions
    """

    name: str = ""
    environments: list[str] = Field(default_factory=list)
    regions: Regions = Field(default_factory=Regions)


class SecurityConfig(ConfigModel):
    """Security domain settings."""

    service_accounts: list[ServiceAccountDefinition] = Field(default_factory=list)


class DnsRecord(ConfigModel):
    """A single DNS record set inside the managed zone."""

    name: str
    type: str = "A"
    ttl: int = Field(default=300, gt=0)
    rrdatas: list[str] = Field(default_factory=list)


class DnsConfig(ConfigModel):
    """DNS domain settings."""

    zone_name: str = ""
    dns_name: str = ""
    description: str = "Managed by Pulumi"
    dnssec: bool = False
    records: list[DnsRecord] = Field(default_factory=list)


class ServiceConfig(ConfigModel):
    """Per-domain service settings keyed by domain name."""

    security: SecurityConfig = Field(default_factory=SecurityConfig)
    dns: DnsConfig | None = None


class EnvironmentSettings(ConfigModel):
    """
    Environment-specific settings for the current deployment stack.

    Attributes:
        project_id: GCP project identifier
        project_number: GCP project number
        primary_region: Region for regional resources
        failover_region: Region used for disaster recovery
        environment: Pulumi stack name (dev, staging, prod)
        organization_id: Optional GCP organization id
        billing_account: Optional billing account id
        dns_zone: Optional DNS zone name
        service_account_definitions: Named service account definitions
        service_accounts: Arbitrary named service accounts (e.g. emails)
    """

    project_id: str
    project_number: str
    primary_region: str = DEFAULT_PRIMARY_REGION
    failover_region: str = DEFAULT_FAILOVER_REGION
    environment: str
    organization_id: str | None = None
    billing_account: str | None = None
    dns_zone: str | None = None
    service_account_definitions: dict[str, ServiceAccountDefinition] = Field(default_factory=dict)
    service_accounts: dict[str, str] = Field(default_factory=dict)

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == PRODUCTION_STACK
