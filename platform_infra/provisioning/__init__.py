"""
Provisioning backends.

Components:
- ProvisioningBackend: Protocol every backend implements
- PulumiBackend: Google Cloud resources through the Pulumi engine
"""

from platform_infra.provisioning.backend import ProvisioningBackend, ResourceHandle
from platform_infra.provisioning.pulumi_backend import PulumiBackend

__all__ = [
    "ProvisioningBackend",
    "ResourceHandle",
    "PulumiBackend",
]
