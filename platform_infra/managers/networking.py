"""
Networking manager.

Steps:
1. VPC: one custom-mode network with regional routing.
2. Subnets (app, data, api): each depends on the VPC; CIDR ranges must
   not overlap.
3. Firewall rules: each depends on the VPC.
"""

import ipaddress
from itertools import combinations

from platform_infra.configs.constants import (
    FIREWALL_RULES,
    SUBNET_CIDRS,
    VPC_DESCRIPTION,
    VPC_NAME,
    VPC_ROUTING_MODE,
)
from platform_infra.core.base_manager import BaseServiceManager, Upstream
from platform_infra.core.options import ServiceManagerOptions
from platform_infra.provisioning import kinds


def _firewall_allows(rule: dict) -> list[dict]:
    """Translate a firewall rule definition into GCP allow blocks."""
    allows = [{"protocol": "tcp", "ports": rule["tcp"]}]
    if rule.get("udp"):
        allows.append({"protocol": "udp", "ports": rule["udp"]})
    if rule.get("icmp"):
        allows.append({"protocol": "icmp"})
    return allows


class NetworkingManager(BaseServiceManager):
    """Manages VPC, subnets, and networking components."""

    default_options = ServiceManagerOptions(
        name="networking-manager",
        description="Manages VPC, subnets, and networking components",
        dependencies=frozenset({"project-manager"}),
        protected=True,
    )

    subnet_cidrs: dict[str, str] = SUBNET_CIDRS
    firewall_rules: tuple[dict, ...] = FIREWALL_RULES

    def _validate(self) -> bool:
        environment = self.config.get_current_environment()
        if not environment.project_id or not environment.primary_region:
            self.logger.error("Project id and primary region are required for networking")
            return False

        try:
            networks = {
                name: ipaddress.ip_network(cidr) for name, cidr in self.subnet_cidrs.items()
            }
        except ValueError as exc:
            self.logger.error(f"Invalid subnet CIDR: {exc}")
            return False

        for (name_a, net_a), (name_b, net_b) in combinations(networks.items(), 2):
            if net_a.overlaps(net_b):
                self.logger.error(f"Subnet CIDRs overlap: {name_a} ({net_a}) and {name_b} ({net_b})")
                return False
        return True

    async def _deploy(self, upstream: Upstream) -> None:
        environment = self.config.get_current_environment()

        vpc = await self._create(
            kinds.NETWORK,
            VPC_NAME,
            {
                "project": environment.project_id,
                "auto_create_subnetworks": False,
                "description": VPC_DESCRIPTION,
                "routing_mode": VPC_ROUTING_MODE,
                "delete_default_routes_on_create": False,
            },
            self.upstream_handles(upstream),
        )

        for name, cidr in self.subnet_cidrs.items():
            await self._create(
                kinds.SUBNETWORK,
                f"{name}-subnet",
                {
                    "project": environment.project_id,
                    "network": vpc.id,
                    "ip_cidr_range": cidr,
                    "region": environment.primary_region,
                    "private_ip_google_access": True,
                },
                [vpc],
            )

        for rule in self.firewall_rules:
            await self._create(
                kinds.FIREWALL,
                f"{rule['name']}-firewall",
                {
                    "project": environment.project_id,
                    "network": vpc.name,
                    "allows": _firewall_allows(rule),
                    "source_ranges": rule["ranges"],
                },
                [vpc],
            )
