"""
Orchestrator for service manager deployments.

Validates and deploys managers in dependency order, hands each manager the
handles of its deployed dependencies and reports a status per manager.

Failure policy:
- A validation or deploy failure is contained to the failing manager and
  everything depending on it (reported as skipped: blocked-by-failure).
- Independent managers keep going, unless fail_fast is set, in which case
  every manager not yet started is skipped with reason 'aborted'.
- Resources created before a failure are left in place.
"""

import asyncio
import logging
from collections.abc import Sequence

from platform_infra.configs.settings import DeploymentSettings
from platform_infra.core.base_manager import BaseServiceManager
from platform_infra.core.exceptions import DeployFailedError
from platform_infra.core.graph import DependencyGraph, ManagerNode
from platform_infra.core.report import (
    ABORTED,
    BLOCKED_BY_FAILURE,
    DeploymentReport,
    ManagerResult,
    ManagerStatus,
)
from platform_infra.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Deploys a set of service managers respecting their dependencies.

    Attributes:
        graph: Dependency graph built from the managers
        parallel: Run independent managers concurrently
        fail_fast: Stop starting new managers after the first failure
    """

    def __init__(
        self,
        managers: Sequence[BaseServiceManager],
        parallel: bool = False,
        fail_fast: bool = False,
    ):
        """
        Build the orchestrator.

        Raises:
            DependencyGraphError: If manager names or dependencies are invalid
        """
        self.graph = DependencyGraph(managers)
        self.parallel = parallel
        self.fail_fast = fail_fast
        self._results: dict[str, ManagerResult] = {}
        self._aborted = False

    @classmethod
    def from_settings(
        cls,
        managers: Sequence[BaseServiceManager],
        settings: DeploymentSettings,
    ) -> "Orchestrator":
        return cls(managers, parallel=settings.parallel, fail_fast=settings.fail_fast)

    async def run(self) -> DeploymentReport:
        """
        Validate and deploy every manager.

        Returns:
            DeploymentReport: Status and handles per manager, in deployment order
        """
        order = self.graph.deployment_order()
        self._results = {node.name: ManagerResult(name=node.name) for node in order}
        self._aborted = False

        logger.info(
            f"Starting deployment of {len(order)} managers "
            f"({'parallel' if self.parallel else 'sequential'}): {[node.name for node in order]}"
        )
        try:
            if self.parallel:
                await self._run_parallel(order)
            else:
                for node in order:
                    await self._run_node(node)
            report = DeploymentReport(list(self._results.values()))
        finally:
            self._results = {}

        log_with_context(
            logger,
            logging.INFO if report.succeeded else logging.ERROR,
            f"Deployment finished: {len(report.deployed)} deployed, "
            f"{len(report.failed)} failed, {len(report.skipped)} skipped",
            statuses=report.to_dict(),
        )
        return report

    async def _run_parallel(self, order: list[ManagerNode]) -> None:
        """Start one task per manager; each waits for its dependencies' tasks."""
        tasks: dict[str, asyncio.Task] = {}
        for node in order:
            waits = [tasks[dependency.name] for dependency in node.dependencies]
            tasks[node.name] = asyncio.create_task(self._run_after(node, waits), name=node.name)
        try:
            await asyncio.gather(*tasks.values())
        except BaseException:
            for task in tasks.values():
                task.cancel()
            raise

    async def _run_after(self, node: ManagerNode, waits: list[asyncio.Task]) -> None:
        if waits:
            await asyncio.gather(*waits)
        await self._run_node(node)

    def _blocking_failure(self, node: ManagerNode) -> str | None:
        """Name of the failed manager blocking this node, if any."""
        for dependency in node.dependencies:
            result = self._results[dependency.name]
            if result.status is not ManagerStatus.DEPLOYED:
                return result.blocked_by or result.name
        return None

    def _record_failure(self, node: ManagerNode) -> None:
        blocked = self.graph.transitive_dependents(node.name)
        if blocked:
            logger.warning(f"Failure of {node.name} blocks: {blocked}")
        if self.fail_fast:
            self._aborted = True

    async def _run_node(self, node: ManagerNode) -> None:
        result = self._results[node.name]
        manager = node.manager

        if self._aborted:
            result.skip(ABORTED)
            logger.warning(f"Skipping {node.name}: deployment aborted")
            return

        blocker = self._blocking_failure(node)
        if blocker is not None:
            result.skip(BLOCKED_BY_FAILURE, blocked_by=blocker)
            logger.warning(f"Skipping {node.name}: blocked by failure of {blocker}")
            return

        result.start()
        if not manager.validate():
            result.validation_failed()
            self._record_failure(node)
            return

        upstream = {
            dependency.name: list(self._results[dependency.name].resources)
            for dependency in node.dependencies
        }
        try:
            resources = await manager.deploy(upstream)
        except DeployFailedError as exc:
            result.deploy_failed(exc.message, exc.resources)
            self._record_failure(node)
            logger.error(f"{node.name} failed after creating {len(exc.resources)} resources: {exc.message}")
            return

        result.deployed(resources)
