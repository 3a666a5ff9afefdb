"""
Deployment results for orchestrated runs.

Tracks per-manager status (pending, deployed, validation-failed,
deploy-failed, skipped) together with the resource handles each manager
produced. Results live only for the duration of a run; infrastructure
state itself is persisted by the provisioning backend.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from platform_infra.core.exceptions import DeploymentIncompleteError

BLOCKED_BY_FAILURE = "blocked-by-failure"
ABORTED = "aborted"


class ManagerStatus(str, Enum):
    """Outcome reported for each manager."""

    PENDING = "pending"
    DEPLOYED = "deployed"
    VALIDATION_FAILED = "validation-failed"
    DEPLOY_FAILED = "deploy-failed"
    SKIPPED = "skipped"


@dataclass
class ManagerResult:
    """Per-manager deployment result.

    Attributes:
        name: Manager name
        status: Current status
        resources: Handles created by the manager, in creation order
        error: Error message if validation or deploy failed
        skip_reason: Why the manager was skipped (blocked-by-failure, aborted)
        blocked_by: Failed manager that caused the skip
        started_at: Timestamp when validation started
        completed_at: Timestamp when the manager finished
    """
    name: str
    status: ManagerStatus = ManagerStatus.PENDING
    resources: list[Any] = field(default_factory=list)
    error: str | None = None
    skip_reason: str | None = None
    blocked_by: str | None = None
    started_at: float | None = None
    completed_at: float | None = None

    def start(self) -> None:
        self.started_at = time.time()

    def deployed(self, resources: list[Any]) -> None:
        self.status = ManagerStatus.DEPLOYED
        self.resources = list(resources)
        self.completed_at = time.time()

    def validation_failed(self) -> None:
        self.status = ManagerStatus.VALIDATION_FAILED
        self.error = f"Validation failed for manager '{self.name}'"
        self.completed_at = time.time()

    def deploy_failed(self, error: str, resources: list[Any]) -> None:
        self.status = ManagerStatus.DEPLOY_FAILED
        self.error = error
        self.resources = list(resources)
        self.completed_at = time.time()

    def skip(self, reason: str, blocked_by: str | None = None) -> None:
        self.status = ManagerStatus.SKIPPED
        self.skip_reason = reason
        self.blocked_by = blocked_by
        self.completed_at = time.time()

    @property
    def failed(self) -> bool:
        return self.status in (ManagerStatus.VALIDATION_FAILED, ManagerStatus.DEPLOY_FAILED)

    @property
    def duration(self) -> float | None:
        if self.started_at and self.completed_at:
            return self.completed_at - self.started_at
        return None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            'name': self.name,
            'status': self.status.value,
            'resource_count': len(self.resources),
        }
        if self.error is not None:
            d['error'] = self.error
        if self.skip_reason is not None:
            d['skip_reason'] = self.skip_reason
        if self.blocked_by is not None:
            d['blocked_by'] = self.blocked_by
        if self.duration is not None:
            d['duration'] = round(self.duration, 3)
        return d


class DeploymentReport:
    """Results of one orchestrated run, in deployment order."""

    def __init__(self, results: list[ManagerResult]):
        self._results = {result.name: result for result in results}

    def __getitem__(self, name: str) -> ManagerResult:
        return self._results[name]

    def __iter__(self):
        return iter(self._results.values())

    def __len__(self) -> int:
        return len(self._results)

    @property
    def order(self) -> list[str]:
        return list(self._results)

    @property
    def deployed(self) -> list[ManagerResult]:
        return [r for r in self if r.status is ManagerStatus.DEPLOYED]

    @property
    def failed(self) -> list[ManagerResult]:
        return [r for r in self if r.failed]

    @property
    def skipped(self) -> list[ManagerResult]:
        return [r for r in self if r.status is ManagerStatus.SKIPPED]

    @property
    def succeeded(self) -> bool:
        return all(r.status is ManagerStatus.DEPLOYED for r in self)

    def status_of(self, name: str) -> ManagerStatus:
        return self._results[name].status

    def resources_for(self, name: str) -> list[Any]:
        """Handles produced by a manager (partial for deploy-failed)."""
        return list(self._results[name].resources)

    def to_dict(self) -> dict[str, dict]:
        return {name: result.to_dict() for name, result in self._results.items()}

    def raise_for_failures(self) -> None:
        """
        Raise if any manager did not deploy.

        Raises:
            DeploymentIncompleteError: If a manager failed or was skipped
        """
        if not self.succeeded:
            raise DeploymentIncompleteError(self)
