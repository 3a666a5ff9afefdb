"""
Label factory for GCP resources.

GCP labels only accept lowercase keys made of letters, digits, '_' and '-',
so resource tags are normalised before being attached.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INVALID_CHARS = re.compile(r"[^a-z0-9_-]")
MAX_LABEL_LENGTH = 63


def to_label_key(key: str) -> str:
    """
    Convert a tag key to a valid GCP label key.

    Args:
        key: Tag key (e.g. 'managedBy')

    Returns:
        Label key (e.g. 'managed_by')
    """
    snake = _CAMEL_BOUNDARY.sub("_", key).lower()
    return _INVALID_CHARS.sub("_", snake)[:MAX_LABEL_LENGTH]


def to_label_value(value: str) -> str:
    """Lowercase and strip characters GCP rejects in label values."""
    return _INVALID_CHARS.sub("-", value.lower())[:MAX_LABEL_LENGTH]


def create_labels(tags: dict[str, str]) -> dict[str, str]:
    """
    Create a GCP label set from resource tags.

    Args:
        tags: Tag mapping produced by the resource option builder

    Returns:
        Dictionary of labels
    """
    return {to_label_key(key): to_label_value(value) for key, value in tags.items()}


def merge_labels(
    base_labels: dict[str, str],
    *additional_labels: dict[str, str],
) -> dict[str, str]:
    """
    Merge multiple label dictionaries.

    Args:
        base_labels: Base label dictionary
        *additional_labels: Additional label dictionaries to merge

    Returns:
        Merged label dictionary
    """
    result = base_labels.copy()
    for labels in additional_labels:
        result.update(labels)
    return result
