"""
Security manager.

Creates:
- One service account per definition in the security config
- KMS key ring in the primary region
- Encryption key (90 day rotation) depending on the key ring
"""

from platform_infra.configs.constants import (
    CRYPTO_KEY_NAME,
    KEY_PURPOSE,
    KEY_RING_NAME,
    KEY_ROTATION_PERIOD,
)
from platform_infra.core.base_manager import BaseServiceManager, Upstream
from platform_infra.core.options import ServiceManagerOptions
from platform_infra.provisioning import kinds
from platform_infra.utils.naming import is_valid_service_account_id, service_account_id


class SecurityManager(BaseServiceManager):
    """Manages security configurations, service accounts, and IAM."""

    default_options = ServiceManagerOptions(
        name="security-manager",
        description="Manages security configurations, service accounts, and IAM",
        dependencies=frozenset({"project-manager"}),
        protected=True,
    )

    def _validate(self) -> bool:
        security = self.config.get_service_config("security")
        if not security.service_accounts:
            self.logger.error("No service accounts configured")
            return False

        names = [sa.name for sa in security.service_accounts]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            self.logger.error(f"Duplicate service account names: {duplicates}")
            return False

        invalid = [
            service_account_id(sa.name)
            for sa in security.service_accounts
            if not is_valid_service_account_id(service_account_id(sa.name))
        ]
        if invalid:
            self.logger.error(f"Invalid service account ids: {invalid}")
            return False
        return True

    async def _deploy(self, upstream: Upstream) -> None:
        environment = self.config.get_current_environment()
        security = self.config.get_service_config("security")
        depends_on = self.upstream_handles(upstream)

        for sa in security.service_accounts:
            account_id = service_account_id(sa.name)
            await self._create(
                kinds.SERVICE_ACCOUNT,
                account_id,
                {
                    "account_id": account_id,
                    "display_name": sa.name,
                    "description": sa.description,
                    "project": environment.project_id,
                },
                depends_on,
            )

        key_ring = await self._create(
            kinds.KEY_RING,
            KEY_RING_NAME,
            {
                "name": KEY_RING_NAME,
                "location": environment.primary_region,
                "project": environment.project_id,
            },
            depends_on,
        )

        await self._create(
            kinds.CRYPTO_KEY,
            CRYPTO_KEY_NAME,
            {
                "name": CRYPTO_KEY_NAME,
                "key_ring": key_ring.id,
                "rotation_period": KEY_ROTATION_PERIOD,
                "purpose": KEY_PURPOSE,
            },
            [key_ring],
        )
