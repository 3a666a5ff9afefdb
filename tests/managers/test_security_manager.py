"""Tests for the security manager."""

import pytest

from platform_infra.core.exceptions import DeployFailedError
from platform_infra.managers.security import SecurityManager
from platform_infra.provisioning import kinds


class TestSecurityValidation:
    """Security configuration checks."""

    def test_configured_accounts_are_valid(self, dev_config, fake_backend):
        assert SecurityManager(dev_config, fake_backend).validate() is True

    def test_empty_service_accounts_fail(self, make_config, fake_backend):
        config = make_config("dev", services={"security": {"service_accounts": []}})
        manager = SecurityManager(config, fake_backend)

        assert manager.validate() is False
        assert fake_backend.created == []

    def test_missing_security_section_fails(self, make_config, fake_backend):
        config = make_config("dev", services={})

        assert SecurityManager(config, fake_backend).validate() is False

    @pytest.mark.parametrize("name", ["ab", "Upper-Case", "bad_underscore", "x" * 30])
    def test_invalid_account_ids_fail(self, make_config, fake_backend, name):
        config = make_config("dev", services={"security": {"service_accounts": [{"name": name}]}})

        assert SecurityManager(config, fake_backend).validate() is False

    def test_duplicate_account_names_fail(self, make_config, fake_backend, caplog):
        accounts = [{"name": "api-gateway"}, {"name": "data-pipeline"}, {"name": "api-gateway"}]
        config = make_config("dev", services={"security": {"service_accounts": accounts}})

        assert SecurityManager(config, fake_backend).validate() is False
        assert "api-gateway" in caplog.text


class TestSecurityDeploy:
    """Service account and KMS creation."""

    @pytest.mark.asyncio
    async def test_creates_accounts_then_key_ring_then_key(self, dev_config, fake_backend):
        manager = SecurityManager(dev_config, fake_backend)
        manager.validate()

        handles = await manager.deploy()

        assert [h.kind for h in handles] == [
            kinds.SERVICE_ACCOUNT,
            kinds.SERVICE_ACCOUNT,
            kinds.KEY_RING,
            kinds.CRYPTO_KEY,
        ]
        assert [h.spec["account_id"] for h in handles[:2]] == ["api-gateway-sa", "data-pipeline-sa"]
        assert handles[0].spec["description"] == "API gateway runtime identity"

    @pytest.mark.asyncio
    async def test_crypto_key_settings(self, dev_config, fake_backend):
        manager = SecurityManager(dev_config, fake_backend)
        manager.validate()

        *_, key_ring, key = await manager.deploy()

        assert key.options.depends_on == (key_ring,)
        assert key.spec["key_ring"] == key_ring.id
        assert key.spec["rotation_period"] == "7776000s"
        assert key.spec["purpose"] == "ENCRYPT_DECRYPT"
        assert key_ring.spec["location"] == "australia-southeast2"

    @pytest.mark.asyncio
    async def test_key_failure_leaves_accounts_and_key_ring(self, dev_config, fake_backend):
        fake_backend.fail_on.add("encryption-key")
        manager = SecurityManager(dev_config, fake_backend)
        manager.validate()

        with pytest.raises(DeployFailedError) as exc_info:
            await manager.deploy()

        assert len(exc_info.value.resources) == 3
        assert exc_info.value.resource == "encryption-key"
