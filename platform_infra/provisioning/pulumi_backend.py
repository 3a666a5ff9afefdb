"""
Pulumi provisioning backend for Google Cloud.

Maps resource kinds to pulumi_gcp resource classes, applies the computed
resource options and waits for the engine to register each resource.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pulumi
import pulumi_gcp as gcp

from platform_infra.core.exceptions import ProvisioningError
from platform_infra.core.options import ResourceOptions
from platform_infra.provisioning import kinds
from platform_infra.utils.labels import create_labels, merge_labels

logger = logging.getLogger(__name__)

RESOURCE_CLASSES: dict[str, type[pulumi.CustomResource]] = {
    kinds.PROJECT_SERVICE: gcp.projects.Service,
    kinds.NETWORK: gcp.compute.Network,
    kinds.SUBNETWORK: gcp.compute.Subnetwork,
    kinds.FIREWALL: gcp.compute.Firewall,
    kinds.SERVICE_ACCOUNT: gcp.serviceaccount.Account,
    kinds.KEY_RING: gcp.kms.KeyRing,
    kinds.CRYPTO_KEY: gcp.kms.CryptoKey,
    kinds.MANAGED_ZONE: gcp.dns.ManagedZone,
    kinds.RECORD_SET: gcp.dns.RecordSet,
}


class PulumiBackend:
    """
    Creates GCP resources through the Pulumi engine.

    Attributes:
        provider: Optional explicit GCP provider for every resource
        await_registration: Wait for each resource URN before returning
    """

    def __init__(
        self,
        provider: pulumi.ProviderResource | None = None,
        await_registration: bool = True,
    ) -> None:
        self.provider = provider
        self.await_registration = await_registration

    def _resource_args(self, kind: str, spec: Mapping[str, Any], options: ResourceOptions) -> dict[str, Any]:
        args = dict(spec)
        if kind in kinds.LABELED_KINDS and options.tags:
            args["labels"] = merge_labels(create_labels(options.tags), args.get("labels") or {})
        return args

    def _resource_opts(self, options: ResourceOptions) -> pulumi.ResourceOptions:
        opts = options.to_pulumi()
        if self.provider is not None:
            opts = pulumi.ResourceOptions.merge(opts, pulumi.ResourceOptions(provider=self.provider))
        return opts

    async def create(
        self,
        kind: str,
        name: str,
        spec: Mapping[str, Any],
        options: ResourceOptions,
    ) -> pulumi.CustomResource:
        """
        Register a GCP resource with the Pulumi engine.

        Raises:
            ProvisioningError: If the kind is unsupported or registration fails
        """
        resource_cls = RESOURCE_CLASSES.get(kind)
        if resource_cls is None:
            raise ProvisioningError(kind, name, ValueError(f"Unsupported resource kind '{kind}'"))

        try:
            resource = resource_cls(
                name,
                opts=self._resource_opts(options),
                **self._resource_args(kind, spec, options),
            )
            if self.await_registration:
                await resource.urn.future()
        except Exception as exc:
            raise ProvisioningError(kind, name, exc) from exc

        logger.debug(f"Registered {kind} '{name}' (protect={options.protect})")
        return resource
