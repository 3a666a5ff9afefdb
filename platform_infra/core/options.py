"""
Resource option builder.

Turns a manager descriptor, the current stack name and explicit dependency
handles into the options applied to a single resource. Invoked once per
resource creation, so it must stay pure.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import pulumi

from platform_infra.configs.constants import MANAGED_BY, PRODUCTION_STACK


@dataclass(frozen=True)
class ServiceManagerOptions:
    """
    Descriptor owned by a service manager.

    Attributes:
        name: Manager name, unique within a deployment run
        description: What the manager provisions
        dependencies: Names of managers that must be deployed first
        protected: Explicit protection override; None follows the stack default
    """
    name: str
    description: str
    dependencies: frozenset[str] = frozenset()
    protected: bool | None = None


@dataclass(frozen=True)
class ResourceOptions:
    """Options applied to one resource creation call."""
    protect: bool
    depends_on: tuple[Any, ...] = ()
    tags: dict[str, str] = field(default_factory=dict)

    def to_pulumi(self) -> pulumi.ResourceOptions:
        """Convert to Pulumi resource options."""
        return pulumi.ResourceOptions(
            protect=self.protect,
            depends_on=list(self.depends_on) or None,
        )


def default_protection(stack: str) -> bool:
    """Production stacks protect resources unless a manager opts out."""
    return stack == PRODUCTION_STACK


def build_resource_options(
    options: ServiceManagerOptions,
    stack: str,
    depends_on: Sequence[Any] = (),
) -> ResourceOptions:
    """
    Build the resource options for one resource.

    Args:
        options: Descriptor of the manager creating the resource
        stack: Current stack name
        depends_on: Explicit dependency handles, kept in order

    Returns:
        ResourceOptions: protect flag, dependency edges and tag set
    """
    protect = options.protected if options.protected is not None else default_protection(stack)
    return ResourceOptions(
        protect=protect,
        depends_on=tuple(depends_on),
        tags={
            "environment": stack,
            "component": options.name,
            "managedBy": MANAGED_BY,
        },
    )
