"""
Resource naming conventions for consistent GCP resource names.

Follows pattern: {environment}-{service}-{resource}
"""

import re
from dataclasses import dataclass

# GCP service account ids: 6-30 chars, lowercase letters, digits and hyphens
SERVICE_ACCOUNT_ID_PATTERN = re.compile(r"^[a-z][a-z0-9-]{4,28}[a-z0-9]$")


@dataclass(frozen=True)
class ResourceNamer:
    """
    Generates consistent resource names for GCP resources.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
    """
    environment: str

    def name(self, service: str, resource: str) -> str:
        """
        Generate a stack-scoped resource name.

        Args:
            service: Owning service (e.g. 'networking')
            resource: Resource identifier (e.g. 'vpc')

        Returns:
            Formatted resource name
        """
        return f"{self.environment}-{service}-{resource}"


def service_account_id(name: str) -> str:
    """Account id created for a service account definition."""
    return f"{name}-sa"


def is_valid_service_account_id(account_id: str) -> bool:
    """Check an account id against GCP's naming rules."""
    return bool(SERVICE_ACCOUNT_ID_PATTERN.match(account_id))
