"""
Utility functions for Pulumi infrastructure.

Provides naming conventions and label factories.
"""

from platform_infra.utils.naming import (
    ResourceNamer,
    is_valid_service_account_id,
    service_account_id,
)
from platform_infra.utils.labels import create_labels, merge_labels, to_label_key

__all__ = [
    "ResourceNamer",
    "is_valid_service_account_id",
    "service_account_id",
    "create_labels",
    "merge_labels",
    "to_label_key",
]
