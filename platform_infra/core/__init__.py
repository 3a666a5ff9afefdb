"""
Service manager orchestration core.

Components:
- BaseServiceManager: Contract every infrastructure domain implements
- build_resource_options: Protection, dependency and tag policy per resource
- DependencyGraph: Manager ordering from declared dependencies
- Orchestrator: Validates and deploys managers, reports per-manager status
"""

from platform_infra.core.base_manager import BaseServiceManager, ManagerState
from platform_infra.core.graph import DependencyGraph
from platform_infra.core.options import (
    ResourceOptions,
    ServiceManagerOptions,
    build_resource_options,
)
from platform_infra.core.orchestrator import Orchestrator
from platform_infra.core.report import DeploymentReport, ManagerResult, ManagerStatus

__all__ = [
    "BaseServiceManager",
    "ManagerState",
    "DependencyGraph",
    "ResourceOptions",
    "ServiceManagerOptions",
    "build_resource_options",
    "Orchestrator",
    "DeploymentReport",
    "ManagerResult",
    "ManagerStatus",
]
