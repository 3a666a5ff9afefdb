"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory provisioning backend, stack configuration factories
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from platform_infra.configs.environment import ConfigurationProvider
from platform_infra.core.exceptions import ProvisioningError
from platform_infra.core.options import ResourceOptions


@dataclass
class FakeHandle:
    """Resource handle returned by the in-memory backend."""

    kind: str
    name: str
    spec: dict[str, Any]
    options: ResourceOptions

    @property
    def id(self) -> str:
        return f"{self.kind}::{self.name}"


@dataclass
class FakeBackend:
    """
    In-memory provisioning backend.

    Attributes:
        fail_on: Resource names whose creation raises ProvisioningError
        created: Every handle created, in call order
    """

    fail_on: set[str] = field(default_factory=set)
    created: list[FakeHandle] = field(default_factory=list)

    async def create(self, kind, name, spec, options) -> FakeHandle:
        if name in self.fail_on:
            raise ProvisioningError(kind, name, RuntimeError("quota exceeded"))
        handle = FakeHandle(kind=kind, name=name, spec=dict(spec), options=options)
        self.created.append(handle)
        return handle

    def by_kind(self, kind: str) -> list[FakeHandle]:
        return [handle for handle in self.created if handle.kind == kind]


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Provide an empty in-memory backend."""
    return FakeBackend()


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Stack configuration values as they appear in Pulumi.<stack>.yaml."""
    return {
        "projectId": "platform-dev-123456",
        "projectNumber": "123456789012",
        "primaryRegion": "australia-southeast2",
        "failoverRegion": "asia-southeast1",
        "project": {
            "name": "platform",
            "environments": ["dev", "staging", "prod"],
        },
        "services": {
            "security": {
                "service_accounts": [
                    {"name": "api-gateway", "description": "API gateway runtime identity"},
                    {"name": "data-pipeline", "description": "Batch data pipeline identity"},
                ],
            },
            "dns": {
                "zone_name": "platform-zone",
                "dns_name": "platform.example.com.",
                "records": [
                    {"name": "www", "type": "CNAME", "rrdatas": ["ghs.googlehosted.com."]},
                    {"name": "@", "type": "A", "ttl": 600, "rrdatas": ["203.0.113.10"]},
                ],
            },
        },
        "serviceAccounts": {"ci": "ci-deployer@platform-dev-123456.iam.gserviceaccount.com"},
    }


@pytest.fixture
def make_config(config_data):
    """
    Build a ConfigurationProvider for a stack.

    Returns:
        Callable taking the stack name and optional top-level overrides
    """

    def _make(stack: str = "dev", **overrides: Any) -> ConfigurationProvider:
        data = {**config_data, **overrides}
        return ConfigurationProvider.from_mapping(data, stack)

    return _make


@pytest.fixture
def dev_config(make_config) -> ConfigurationProvider:
    """Configuration for the dev stack."""
    return make_config("dev")


@pytest.fixture
def prod_config(make_config) -> ConfigurationProvider:
    """Configuration for the prod stack."""
    return make_config("prod")
