"""
Provisioning backend interface.

Managers never talk to a cloud SDK directly; they hand a declarative
descriptor and the computed resource options to a backend that returns an
opaque handle.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from platform_infra.core.options import ResourceOptions

ResourceHandle = Any


@runtime_checkable
class ProvisioningBackend(Protocol):
    """Creates resources and returns opaque handles."""

    async def create(
        self,
        kind: str,
        name: str,
        spec: Mapping[str, Any],
        options: ResourceOptions,
    ) -> ResourceHandle:
        """
        Create one resource.

        Args:
            kind: Resource type token (see provisioning.kinds)
            name: Logical resource name
            spec: Resource arguments
            options: Options from the resource option builder

        Returns:
            Handle for the provisioned (or pending) resource

        Raises:
            ProvisioningError: If the resource cannot be created
        """
        ...
