"""
Infrastructure constants for the GCP platform.

Contains required APIs, CIDR blocks, firewall rules and KMS defaults.
"""

from typing import Final

MANAGED_BY: Final[str] = "pulumi"
PRODUCTION_STACK: Final[str] = "prod"

DEFAULT_PRIMARY_REGION: Final[str] = "australia-southeast2"
DEFAULT_FAILOVER_REGION: Final[str] = "asia-southeast1"

# Platform APIs enabled on the project, in deployment order
REQUIRED_APIS: Final[tuple[str, ...]] = (
    "apigateway.googleapis.com",
    "cloudresourcemanager.googleapis.com",
    "compute.googleapis.com",
    "dns.googleapis.com",
    "monitoring.googleapis.com",
    "secretmanager.googleapis.com",
    "servicenetworking.googleapis.com",
    "sql-component.googleapis.com",
)

# VPC Configuration
VPC_NAME: Final[str] = "main-vpc"
VPC_DESCRIPTION: Final[str] = "Main VPC for the platform"
VPC_ROUTING_MODE: Final[str] = "REGIONAL"

# Subnet CIDR blocks (must not overlap)
SUBNET_CIDRS: Final[dict[str, str]] = {
    "app": "10.0.1.0/24",
    "data": "10.0.2.0/24",
    "api": "10.0.3.0/24",
}

# Firewall rules applied to the main VPC
FIREWALL_RULES: Final[tuple[dict, ...]] = (
    {
        "name": "allow-internal",
        "ranges": ["10.0.0.0/8"],
        "tcp": ["0-65535"],
        "udp": ["0-65535"],
        "icmp": True,
    },
    {
        "name": "allow-https",
        "ranges": ["0.0.0.0/0"],
        "tcp": ["443"],
    },
)

# KMS configuration
KEY_RING_NAME: Final[str] = "main-keyring"
CRYPTO_KEY_NAME: Final[str] = "encryption-key"
KEY_ROTATION_PERIOD: Final[str] = "7776000s"  # 90 days
KEY_PURPOSE: Final[str] = "ENCRYPT_DECRYPT"

# Cloud DNS
SUPPORTED_RECORD_TYPES: Final[frozenset[str]] = frozenset(
    {"A", "AAAA", "CNAME", "MX", "TXT", "NS", "SRV", "CAA"}
)
