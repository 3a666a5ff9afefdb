"""
Pulumi infrastructure-as-code for the GCP platform.

Infrastructure is composed of service managers, one per domain:
- Project: required platform API enablement
- Networking: VPC, subnets and firewall rules
- Security: service accounts and KMS encryption keys
- DNS: Cloud DNS managed zone and records

Managers are deployed by an orchestrator in dependency order.
"""

__version__ = "0.1.0"
