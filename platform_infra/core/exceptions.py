"""
Exception hierarchy for platform provisioning.

Provides layered exception structure for configuration, dependency-graph,
manager lifecycle and provisioning errors. All exceptions carry a details
dict for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy across managers and orchestrator
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from platform_infra.core.report import DeploymentReport


class PlatformInfraError(Exception):
    """Base exception for all platform provisioning errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationInvalidError(PlatformInfraError):
    """Raised when stack configuration is missing or malformed."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            key: Configuration key that failed validation
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class DependencyGraphError(PlatformInfraError):
    """Base exception for invalid manager dependency graphs."""


class DependencyUnresolvedError(DependencyGraphError):
    """Raised when a manager depends on a manager that is not part of the run."""

    def __init__(self, manager: str, dependency: str) -> None:
        self.manager = manager
        self.dependency = dependency
        super().__init__(
            f"Manager '{manager}' depends on unknown manager '{dependency}'",
            {"manager": manager, "dependency": dependency},
        )


class DuplicateManagerError(DependencyGraphError):
    """Raised when two managers share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate manager name: {name}", {"manager": name})


class CyclicDependencyError(DependencyGraphError):
    """Raised when manager dependencies form a cycle."""

    def __init__(self, managers: list[str]) -> None:
        self.managers = managers
        super().__init__(
            f"Dependency cycle between managers: {', '.join(managers)}",
            {"managers": managers},
        )


class ManagerStateError(PlatformInfraError):
    """Raised when a manager operation is invoked in the wrong lifecycle state."""

    def __init__(self, manager: str, state: str, operation: str) -> None:
        self.manager = manager
        self.state = state
        self.operation = operation
        super().__init__(
            f"Cannot {operation} manager '{manager}' in state '{state}'",
            {"manager": manager, "state": state, "operation": operation},
        )


class ProvisioningError(PlatformInfraError):
    """Raised by a provisioning backend when a resource cannot be created."""

    def __init__(
        self,
        kind: str,
        name: str,
        cause: Exception | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.cause = cause
        details: dict[str, Any] = {"kind": kind, "resource": name}
        if cause is not None:
            details["error_type"] = type(cause).__name__
        super().__init__(f"Failed to provision {kind} '{name}': {cause}", details)


class DeployFailedError(PlatformInfraError):
    """
    Raised when a manager's deploy fails part way.

    Resources created before the failing call are left in place and are
    available on ``resources``.
    """

    def __init__(
        self,
        manager: str,
        resource: str | None = None,
        resources: list[Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.manager = manager
        self.resource = resource
        self.resources = list(resources or [])
        self.cause = cause
        details: dict[str, Any] = {
            "manager": manager,
            "created_before_failure": len(self.resources),
        }
        if resource:
            details["resource"] = resource
        message = f"Deployment of manager '{manager}' failed"
        if cause is not None:
            message = f"{message}: {cause.message if isinstance(cause, PlatformInfraError) else cause}"
        super().__init__(message, details)


class DeploymentIncompleteError(PlatformInfraError):
    """Raised when a deployment run finished with failed or skipped managers."""

    def __init__(self, report: "DeploymentReport") -> None:
        self.report = report
        failed = [result.name for result in report.failed]
        skipped = [result.name for result in report.skipped]
        super().__init__(
            f"Deployment incomplete: {len(failed)} failed, {len(skipped)} skipped",
            {"failed": failed, "skipped": skipped},
        )
