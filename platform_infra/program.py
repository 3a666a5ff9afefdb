"""
Pulumi program wiring.

Builds the service managers for the current stack, runs the orchestrator
and exports per-manager deployment status.
"""

import logging

import pulumi

from platform_infra.configs.environment import ConfigurationProvider
from platform_infra.configs.settings import DeploymentSettings
from platform_infra.core.base_manager import BaseServiceManager
from platform_infra.core.orchestrator import Orchestrator
from platform_infra.core.report import DeploymentReport
from platform_infra.managers import DnsManager, NetworkingManager, ProjectManager, SecurityManager
from platform_infra.provisioning.backend import ProvisioningBackend

logger = logging.getLogger(__name__)


def build_managers(
    config: ConfigurationProvider,
    backend: ProvisioningBackend,
) -> list[BaseServiceManager]:
    """
    Instantiate the managers for this stack.

    The DNS manager is only included when DNS is configured.

    Args:
        config: Configuration provider
        backend: Provisioning backend shared by all managers

    Returns:
        Managers in declaration order (the orchestrator sorts them)
    """
    managers: list[BaseServiceManager] = [
        ProjectManager(config, backend),
        NetworkingManager(config, backend),
        SecurityManager(config, backend),
    ]
    if config.get_service_config("dns") is not None:
        managers.append(DnsManager(config, backend))
    else:
        logger.info("DNS not configured, skipping dns-manager")
    return managers


def export_report(report: DeploymentReport) -> None:
    """Export deployment status and resource counts as stack outputs."""
    pulumi.export("deployment_status", {result.name: result.status.value for result in report})
    pulumi.export(
        "resource_counts",
        {result.name: len(result.resources) for result in report},
    )


async def deploy_platform(
    config: ConfigurationProvider,
    backend: ProvisioningBackend,
    settings: DeploymentSettings | None = None,
) -> DeploymentReport:
    """
    Deploy every manager for the current stack.

    Raises:
        DependencyGraphError: If manager dependencies are invalid
        DeploymentIncompleteError: If any manager failed or was skipped
    """
    settings = settings or DeploymentSettings()
    orchestrator = Orchestrator.from_settings(build_managers(config, backend), settings)

    report = await orchestrator.run()
    export_report(report)
    report.raise_for_failures()
    return report
