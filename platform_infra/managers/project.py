"""
Project manager.

Enables the platform APIs every other manager relies on. APIs have no
dependencies on each other, but all of them must succeed.
"""

from platform_infra.configs.constants import REQUIRED_APIS
from platform_infra.core.base_manager import BaseServiceManager, Upstream
from platform_infra.core.options import ServiceManagerOptions
from platform_infra.provisioning import kinds


class ProjectManager(BaseServiceManager):
    """Manages project-level resources and API enablement."""

    default_options = ServiceManagerOptions(
        name="project-manager",
        description="Manages project-level resources and API enablement",
    )

    required_apis: tuple[str, ...] = REQUIRED_APIS

    def _validate(self) -> bool:
        project = self.config.get_project_config()
        if not project.name or not project.environments:
            self.logger.error("Invalid project configuration: name and environments are required")
            return False
        if self.stack not in project.environments:
            self.logger.warning(
                f"Stack '{self.stack}' is not listed in project environments {project.environments}"
            )
        return True

    async def _deploy(self, upstream: Upstream) -> None:
        environment = self.config.get_current_environment()
        depends_on = self.upstream_handles(upstream)

        for api in self.required_apis:
            await self._create(
                kinds.PROJECT_SERVICE,
                f"{api}-enabled",
                {
                    "project": environment.project_id,
                    "service": api,
                    "disable_on_destroy": False,
                },
                depends_on,
            )
