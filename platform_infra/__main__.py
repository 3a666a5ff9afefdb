"""
Pulumi program entry point for the GCP platform.

Deploys managers in dependency order:
1. Configuration (stack config + PLATFORM_* runtime settings)
2. Project APIs
3. Networking, Security, DNS (each after the project APIs)
"""

import asyncio

from platform_infra.configs.environment import ConfigurationProvider
from platform_infra.configs.settings import DeploymentSettings
from platform_infra.observability.logger import configure_logging
from platform_infra.program import deploy_platform
from platform_infra.provisioning.pulumi_backend import PulumiBackend


def main() -> None:
    """Deploy the platform infrastructure."""
    settings = DeploymentSettings()
    configure_logging(settings.log_level, forward_to_pulumi=settings.forward_logs_to_pulumi)

    config = ConfigurationProvider.from_pulumi()
    backend = PulumiBackend()

    # The Pulumi runtime drives its own event loop and waits for outstanding tasks
    asyncio.ensure_future(deploy_platform(config, backend, settings))


# Execute
main()
