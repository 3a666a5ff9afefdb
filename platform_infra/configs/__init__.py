"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from platform_infra.configs.base import (
    DnsConfig,
    DnsRecord,
    EnvironmentSettings,
    ProjectConfig,
    Regions,
    SecurityConfig,
    ServiceAccountDefinition,
    ServiceConfig,
)
from platform_infra.configs.constants import (
    FIREWALL_RULES,
    REQUIRED_APIS,
    SUBNET_CIDRS,
)
from platform_infra.configs.environment import ConfigurationProvider
from platform_infra.configs.settings import DeploymentSettings

__all__ = [
    "ConfigurationProvider",
    "DeploymentSettings",
    "DnsConfig",
    "DnsRecord",
    "EnvironmentSettings",
    "ProjectConfig",
    "Regions",
    "SecurityConfig",
    "ServiceAccountDefinition",
    "ServiceConfig",
    "FIREWALL_RULES",
    "REQUIRED_APIS",
    "SUBNET_CIDRS",
]
