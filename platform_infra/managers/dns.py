"""
DNS manager.

Creates a public Cloud DNS managed zone and the record sets configured
for it. Record sets depend on the zone.
"""

from platform_infra.configs.constants import SUPPORTED_RECORD_TYPES
from platform_infra.core.base_manager import BaseServiceManager, Upstream
from platform_infra.core.options import ServiceManagerOptions
from platform_infra.provisioning import kinds


def _qualify(name: str, dns_name: str) -> str:
    """Turn a record name relative to the zone into a fully-qualified name."""
    if name in ("", "@"):
        return dns_name
    if name.endswith("."):
        return name
    return f"{name}.{dns_name}"


def _in_zone(fqdn: str, dns_name: str) -> bool:
    return fqdn == dns_name or fqdn.endswith(f".{dns_name}")


class DnsManager(BaseServiceManager):
    """Manages the Cloud DNS zone and its record sets."""

    default_options = ServiceManagerOptions(
        name="dns-manager",
        description="Manages DNS zone resources",
        dependencies=frozenset({"project-manager"}),
    )

    def _validate(self) -> bool:
        dns = self.config.get_service_config("dns")
        if dns is None:
            self.logger.error("No DNS configuration")
            return False
        if not dns.zone_name:
            self.logger.error("DNS zone name is required")
            return False
        if not dns.dns_name.endswith("."):
            self.logger.error(f"DNS name must be fully qualified (end with '.'): '{dns.dns_name}'")
            return False

        for record in dns.records:
            if record.type.upper() not in SUPPORTED_RECORD_TYPES:
                self.logger.error(f"Unsupported record type '{record.type}' for '{record.name}'")
                return False
            if not record.rrdatas:
                self.logger.error(f"Record '{record.name}' has no rrdatas")
                return False
            if not _in_zone(_qualify(record.name, dns.dns_name), dns.dns_name):
                self.logger.error(f"Record '{record.name}' is outside zone '{dns.dns_name}'")
                return False
        return True

    async def _deploy(self, upstream: Upstream) -> None:
        environment = self.config.get_current_environment()
        dns = self.config.get_service_config("dns")

        spec = {
            "name": dns.zone_name,
            "dns_name": dns.dns_name,
            "description": dns.description,
            "project": environment.project_id,
            "visibility": "public",
        }
        if dns.dnssec:
            spec["dnssec_config"] = {"state": "on"}

        zone = await self._create(
            kinds.MANAGED_ZONE,
            dns.zone_name,
            spec,
            self.upstream_handles(upstream),
        )

        for record in dns.records:
            record_type = record.type.upper()
            fqdn = _qualify(record.name, dns.dns_name)
            await self._create(
                kinds.RECORD_SET,
                f"{dns.zone_name}-{record_type.lower()}-{fqdn.rstrip('.')}",
                {
                    "name": fqdn,
                    "managed_zone": zone.name,
                    "type": record_type,
                    "ttl": record.ttl,
                    "rrdatas": record.rrdatas,
                    "project": environment.project_id,
                },
                [zone],
            )
