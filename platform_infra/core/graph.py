"""
Dependency graph for service managers.

Builds a graph from each manager's declared dependencies and computes the
deployment order (dependencies before dependents). Graph errors are raised
at construction time, before anything is deployed.
"""

import heapq
import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from platform_infra.core.base_manager import BaseServiceManager
from platform_infra.core.exceptions import (
    CyclicDependencyError,
    DependencyUnresolvedError,
    DuplicateManagerError,
)

logger = logging.getLogger(__name__)


@dataclass
class ManagerNode:
    """A manager in the dependency graph.

    Attributes:
        manager: The wrapped service manager
        index: Position in the input sequence, used to break ties
        dependencies: Nodes that must be deployed first
        dependents: Nodes that wait for this one
    """
    manager: BaseServiceManager
    index: int
    dependencies: list['ManagerNode'] = field(default_factory=list)
    dependents: list['ManagerNode'] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.manager.name

    @property
    def is_root(self) -> bool:
        return not self.dependencies

    def __repr__(self) -> str:
        return f"ManagerNode({self.name}, deps={[d.name for d in self.dependencies]})"


class DependencyGraph:
    """Directed acyclic graph over service managers."""

    def __init__(self, managers: Sequence[BaseServiceManager]):
        """Build the graph.

        Args:
            managers: Managers taking part in the run

        Raises:
            DuplicateManagerError: If two managers share a name
            DependencyUnresolvedError: If a dependency names an unknown manager
            CyclicDependencyError: If dependencies form a cycle
        """
        self._nodes: dict[str, ManagerNode] = {}
        for index, manager in enumerate(managers):
            if manager.name in self._nodes:
                raise DuplicateManagerError(manager.name)
            self._nodes[manager.name] = ManagerNode(manager=manager, index=index)

        for node in self._nodes.values():
            # Sorted so dependency lists do not depend on set iteration order
            for dependency in sorted(node.manager.dependencies):
                if dependency not in self._nodes:
                    raise DependencyUnresolvedError(node.name, dependency)
                parent = self._nodes[dependency]
                node.dependencies.append(parent)
                parent.dependents.append(node)

        self._order = self._topological_order()
        logger.debug(f"Deployment order: {[node.name for node in self._order]}")

    def _topological_order(self) -> list[ManagerNode]:
        """Kahn's algorithm; ready nodes are taken in input order."""
        in_degree = {name: len(node.dependencies) for name, node in self._nodes.items()}
        ready = [(node.index, node.name) for node in self._nodes.values() if in_degree[node.name] == 0]
        heapq.heapify(ready)

        ordered: list[ManagerNode] = []
        while ready:
            _, name = heapq.heappop(ready)
            node = self._nodes[name]
            ordered.append(node)
            for dependent in node.dependents:
                in_degree[dependent.name] -= 1
                if in_degree[dependent.name] == 0:
                    heapq.heappush(ready, (dependent.index, dependent.name))

        if len(ordered) != len(self._nodes):
            remaining = sorted(name for name, degree in in_degree.items() if degree > 0)
            raise CyclicDependencyError(remaining)
        return ordered

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def get_node(self, name: str) -> ManagerNode:
        """Get a node by manager name.

        Raises:
            KeyError: If the name is not in the graph
        """
        return self._nodes[name]

    def deployment_order(self) -> list[ManagerNode]:
        """Nodes with every dependency ahead of its dependents."""
        return list(self._order)

    def transitive_dependents(self, name: str) -> list[str]:
        """Names of every manager depending on `name`, directly or not (BFS order)."""
        seen: set[str] = set()
        result: list[str] = []
        queue: deque[ManagerNode] = deque(self._nodes[name].dependents)
        while queue:
            node = queue.popleft()
            if node.name in seen:
                continue
            seen.add(node.name)
            result.append(node.name)
            queue.extend(node.dependents)
        return result
