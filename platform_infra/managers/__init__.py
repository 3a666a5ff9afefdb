"""
Service managers, one per infrastructure domain.

Managers:
- ProjectManager: Platform API enablement
- NetworkingManager: VPC, subnets, firewall rules
- SecurityManager: Service accounts, KMS key ring and key
- DnsManager: Cloud DNS zone and records
"""

from platform_infra.managers.dns import DnsManager
from platform_infra.managers.networking import NetworkingManager
from platform_infra.managers.project import ProjectManager
from platform_infra.managers.security import SecurityManager

__all__ = [
    "DnsManager",
    "NetworkingManager",
    "ProjectManager",
    "SecurityManager",
]
