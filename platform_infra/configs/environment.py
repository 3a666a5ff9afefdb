"""
Environment configuration provider.

Loads and validates configuration from Pulumi stack config files. The
provider is constructed once at program start and passed to every
service manager; it never changes afterwards.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pulumi
from pydantic import ValidationError

from platform_infra.configs.base import (
    EnvironmentSettings,
    ProjectConfig,
    ServiceConfig,
)
from platform_infra.core.exceptions import ConfigurationInvalidError
from platform_infra.utils.naming import ResourceNamer

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("projectId", "projectNumber")
SCALAR_KEYS = (
    "projectId",
    "projectNumber",
    "organizationId",
    "billingAccount",
    "primaryRegion",
    "failoverRegion",
    "dnsZone",
)
OBJECT_KEYS = ("project", "services", "serviceAccounts")


def _first_error(exc: ValidationError) -> str:
    """Render the first pydantic error as 'field.path: message'."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


class ConfigurationProvider:
    """
    Resolved stack configuration for the current environment.

    Attributes:
        stack: Current Pulumi stack name
    """

    def __init__(
        self,
        environment: EnvironmentSettings,
        project: ProjectConfig,
        services: ServiceConfig,
    ) -> None:
        self._environment = environment
        self._project = project
        self._services = services
        self._namer = ResourceNamer(environment=environment.environment)
        logger.info(
            f"Project configuration initialized for stack '{environment.environment}' "
            f"(project={environment.project_id}, region={environment.primary_region})"
        )

    @property
    def stack(self) -> str:
        return self._environment.environment

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], stack: str) -> "ConfigurationProvider":
        """
        Build a provider from a plain mapping of stack config values.

        Args:
            data: Config values keyed like the Pulumi stack file (camelCase)
            stack: Stack name the settings belong to

        Returns:
            ConfigurationProvider: Fully resolved provider

        Raises:
            ConfigurationInvalidError: If a required key is missing or a value is malformed
        """
        for key in REQUIRED_KEYS:
            if not data.get(key):
                raise ConfigurationInvalidError(f"Missing required configuration value '{key}'", key=key)

        project_data = dict(data.get("project") or {})
        project_data.setdefault(
            "regions",
            {
                key: value
                for key, value in (
                    ("primary", data.get("primaryRegion")),
                    ("failover", data.get("failoverRegion")),
                )
                if value
            },
        )

        try:
            project = ProjectConfig.model_validate(project_data)
        except ValidationError as exc:
            raise ConfigurationInvalidError(
                f"Invalid project configuration: {_first_error(exc)}", key="project"
            ) from exc

        try:
            services = ServiceConfig.model_validate(data.get("services") or {})
        except ValidationError as exc:
            raise ConfigurationInvalidError(
                f"Invalid services configuration: {_first_error(exc)}", key="services"
            ) from exc

        try:
            environment = EnvironmentSettings(
                project_id=str(data["projectId"]),
                project_number=str(data["projectNumber"]),
                primary_region=data.get("primaryRegion") or project.regions.primary,
                failover_region=data.get("failoverRegion") or project.regions.failover,
                environment=stack,
                organization_id=data.get("organizationId"),
                billing_account=data.get("billingAccount"),
                dns_zone=data.get("dnsZone") or (services.dns.zone_name if services.dns else None),
                service_account_definitions={
                    definition.name: definition
                    for definition in services.security.service_accounts
                },
                service_accounts=dict(data.get("serviceAccounts") or {}),
            )
        except ValidationError as exc:
            raise ConfigurationInvalidError(
                f"Invalid environment configuration: {_first_error(exc)}"
            ) from exc

        return cls(environment=environment, project=project, services=services)

    @classmethod
    def from_pulumi(
        cls,
        config: pulumi.Config | None = None,
        stack: str | None = None,
    ) -> "ConfigurationProvider":
        """
        Load configuration from the Pulumi stack config.

        Args:
            config: Pulumi config bag (defaults to the project namespace)
            stack: Stack name (defaults to the current Pulumi stack)

        Raises:
            ConfigurationInvalidError: If required config values are missing or malformed
        """
        config = config or pulumi.Config()
        data: dict[str, Any] = {key: config.get(key) for key in SCALAR_KEYS}
        for key in OBJECT_KEYS:
            try:
                data[key] = config.get_object(key)
            except pulumi.ConfigTypeError as exc:
                raise ConfigurationInvalidError(
                    f"Configuration value '{key}' is not a valid object", key=key
                ) from exc

        return cls.from_mapping(data, stack or pulumi.get_stack())

    def get_current_environment(self) -> EnvironmentSettings:
        """Settings for the current stack."""
        return self._environment

    def get_project_config(self) -> ProjectConfig:
        """Project name, environments and regions."""
        return self._project

    def get_service_config(self, domain: str | None = None) -> Any:
        """
        Get service settings, optionally narrowed to one domain.

        Args:
            domain: Domain name (e.g. 'security', 'dns'); None returns all services

        Raises:
            ConfigurationInvalidError: If the domain is unknown
        """
        if domain is None:
            return self._services
        if domain not in ServiceConfig.model_fields:
            raise ConfigurationInvalidError(f"Unknown service domain '{domain}'", key=domain)
        return getattr(self._services, domain)

    def get_resource_name(self, service: str, name: str) -> str:
        """Stack-scoped resource name, e.g. 'dev-networking-vpc'."""
        return self._namer.name(service, name)
