"""
Base service manager.

A service manager encapsulates one infrastructure domain. It validates the
part of the stack configuration it depends on, then deploys its resources
through a provisioning backend, computing resource options for every call.

Lifecycle:
    constructed -> validated -> deployed
    constructed -> validation-failed
    constructed -> validated -> deploy-failed
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any

from platform_infra.core.exceptions import DeployFailedError, ManagerStateError
from platform_infra.core.options import (
    ResourceOptions,
    ServiceManagerOptions,
    build_resource_options,
)
from platform_infra.observability.log_utils import log_exception_with_context

if TYPE_CHECKING:
    from platform_infra.configs.environment import ConfigurationProvider
    from platform_infra.provisioning.backend import ProvisioningBackend

Upstream = Mapping[str, Sequence[Any]]


class ManagerState(str, Enum):
    """Lifecycle state of a service manager."""

    CONSTRUCTED = "constructed"
    VALIDATED = "validated"
    VALIDATION_FAILED = "validation-failed"
    DEPLOYED = "deployed"
    DEPLOY_FAILED = "deploy-failed"


class BaseServiceManager(ABC):
    """
    Abstract base for all service managers.

    Subclasses provide a default descriptor and implement ``_validate`` and
    ``_deploy``; this class owns state transitions, logging and resource
    option computation.

    Attributes:
        config: Configuration provider shared by all managers
        backend: Provisioning backend used for every resource
        options: Manager descriptor
        stack: Current stack name
    """

    default_options: ServiceManagerOptions

    def __init__(
        self,
        config: "ConfigurationProvider",
        backend: "ProvisioningBackend",
        options: ServiceManagerOptions | None = None,
    ) -> None:
        self.config = config
        self.backend = backend
        self.options = options or self.default_options
        self.stack = config.get_current_environment().environment
        self.logger = logging.getLogger(f"{__name__}.{self.options.name}")
        self.state = ManagerState.CONSTRUCTED
        self._resources: list[Any] = []

    @property
    def name(self) -> str:
        return self.options.name

    @property
    def description(self) -> str:
        return self.options.description

    @property
    def dependencies(self) -> frozenset[str]:
        return self.options.dependencies

    @property
    def resources(self) -> list[Any]:
        """Handles created so far, in creation order."""
        return list(self._resources)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name}, state={self.state.value})"

    def validate(self) -> bool:
        """
        Check that the configuration this manager depends on is complete.

        Returns:
            bool: True when deploy may proceed

        Raises:
            ManagerStateError: If called after validation already ran
        """
        if self.state is not ManagerState.CONSTRUCTED:
            raise ManagerStateError(self.name, self.state.value, "validate")

        self.logger.info(f"Validating {self.name} configuration...")
        if self._validate():
            self.state = ManagerState.VALIDATED
            return True

        self.state = ManagerState.VALIDATION_FAILED
        self.logger.error(f"Validation failed for {self.name}")
        return False

    async def deploy(self, upstream: Upstream | None = None) -> list[Any]:
        """
        Deploy this manager's resources.

        Args:
            upstream: Handles of deployed dependency managers, keyed by manager name

        Returns:
            list: Every handle created, in creation order

        Raises:
            ManagerStateError: If validate() has not returned True
            DeployFailedError: If the backend or the manager fails part way
        """
        if self.state is not ManagerState.VALIDATED:
            raise ManagerStateError(self.name, self.state.value, "deploy")

        self.logger.info(f"Deploying {self.name}: {self.description}")
        try:
            await self._deploy(upstream or {})
        except DeployFailedError:
            self.state = ManagerState.DEPLOY_FAILED
            raise
        except Exception as exc:
            self.state = ManagerState.DEPLOY_FAILED
            log_exception_with_context(
                self.logger,
                f"Unexpected error deploying {self.name}",
                exc,
                manager=self.name,
                created=len(self._resources),
            )
            raise DeployFailedError(self.name, None, self._resources, exc) from exc

        self.state = ManagerState.DEPLOYED
        self.logger.info(f"Deployed {self.name} ({len(self._resources)} resources)")
        return self.resources

    def resource_options(self, depends_on: Sequence[Any] = ()) -> ResourceOptions:
        """Resource options for the next resource created by this manager."""
        return build_resource_options(self.options, self.stack, depends_on)

    async def _create(
        self,
        kind: str,
        name: str,
        spec: Mapping[str, Any],
        depends_on: Sequence[Any] = (),
    ) -> Any:
        """
        Create one resource and record its handle.

        Raises:
            DeployFailedError: If the backend reports a failure
        """
        try:
            handle = await self.backend.create(kind, name, spec, self.resource_options(depends_on))
        except Exception as exc:
            log_exception_with_context(
                self.logger,
                f"Failed to create {name}",
                exc,
                manager=self.name,
                kind=kind,
                created=len(self._resources),
            )
            raise DeployFailedError(self.name, name, self._resources, exc) from exc

        self._resources.append(handle)
        return handle

    @staticmethod
    def upstream_handles(upstream: Upstream) -> list[Any]:
        """Flatten upstream handles into one ordered list."""
        return [handle for handles in upstream.values() for handle in handles]

    @abstractmethod
    def _validate(self) -> bool:
        """Domain-specific configuration checks."""

    @abstractmethod
    async def _deploy(self, upstream: Upstream) -> None:
        """Create this manager's resources via ``_create``."""
