"""
Tests for the service manager lifecycle.

Validates state transitions, option computation per resource and partial
failure handling.
"""

import pytest

from platform_infra.core.base_manager import BaseServiceManager, ManagerState
from platform_infra.core.exceptions import DeployFailedError, ManagerStateError
from platform_infra.core.options import ServiceManagerOptions


class TwoResourceManager(BaseServiceManager):
    """Creates a parent resource and a child depending on it."""

    default_options = ServiceManagerOptions(name="two-resource-manager", description="Test manager")

    def __init__(self, config, backend, options=None, valid=True):
        super().__init__(config, backend, options)
        self.valid = valid
        self.deploy_calls = 0

    def _validate(self) -> bool:
        return self.valid

    async def _deploy(self, upstream) -> None:
        self.deploy_calls += 1
        parent = await self._create("test:Parent", "parent", {}, self.upstream_handles(upstream))
        await self._create("test:Child", "child", {"parent_id": parent.id}, [parent])


class TestValidate:
    """validate() state transitions."""

    def test_valid_configuration_moves_to_validated(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)

        assert manager.validate() is True
        assert manager.state is ManagerState.VALIDATED

    def test_invalid_configuration_returns_false_without_raising(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend, valid=False)

        assert manager.validate() is False
        assert manager.state is ManagerState.VALIDATION_FAILED
        assert fake_backend.created == []

    def test_validate_twice_is_rejected(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)
        manager.validate()

        with pytest.raises(ManagerStateError):
            manager.validate()


class TestDeploy:
    """deploy() behaviour."""

    @pytest.mark.asyncio
    async def test_deploy_before_validate_is_rejected(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)

        with pytest.raises(ManagerStateError) as exc_info:
            await manager.deploy()

        assert exc_info.value.state == "constructed"
        assert manager.deploy_calls == 0

    @pytest.mark.asyncio
    async def test_deploy_after_failed_validation_is_rejected(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend, valid=False)
        manager.validate()

        with pytest.raises(ManagerStateError):
            await manager.deploy()

    @pytest.mark.asyncio
    async def test_deploy_returns_handles_in_creation_order(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)
        manager.validate()

        handles = await manager.deploy()

        assert [h.name for h in handles] == ["parent", "child"]
        assert manager.state is ManagerState.DEPLOYED

    @pytest.mark.asyncio
    async def test_every_resource_gets_builder_options(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)
        manager.validate()

        parent, child = await manager.deploy()

        assert parent.options.protect is False
        assert child.options.depends_on == (parent,)
        assert {h.options.tags["component"] for h in (parent, child)} == {"two-resource-manager"}

    @pytest.mark.asyncio
    async def test_upstream_handles_become_dependencies(self, dev_config, fake_backend):
        manager = TwoResourceManager(dev_config, fake_backend)
        manager.validate()
        upstream = {"a": ["a1", "a2"], "b": ["b1"]}

        parent, _ = await manager.deploy(upstream)

        assert parent.options.depends_on == ("a1", "a2", "b1")

    @pytest.mark.asyncio
    async def test_backend_failure_keeps_partial_handles(self, dev_config, fake_backend):
        fake_backend.fail_on.add("child")
        manager = TwoResourceManager(dev_config, fake_backend)
        manager.validate()

        with pytest.raises(DeployFailedError) as exc_info:
            await manager.deploy()

        error = exc_info.value
        assert error.manager == "two-resource-manager"
        assert error.resource == "child"
        assert [h.name for h in error.resources] == ["parent"]
        assert manager.state is ManagerState.DEPLOY_FAILED
        assert [h.name for h in fake_backend.created] == ["parent"]

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_deploy_failed(self, dev_config, fake_backend):
        class BrokenManager(TwoResourceManager):
            async def _deploy(self, upstream) -> None:
                await self._create("test:Parent", "parent", {})
                raise KeyError("missing")

        manager = BrokenManager(dev_config, fake_backend)
        manager.validate()

        with pytest.raises(DeployFailedError) as exc_info:
            await manager.deploy()

        assert isinstance(exc_info.value.cause, KeyError)
        assert exc_info.value.resource is None
        assert [h.name for h in exc_info.value.resources] == ["parent"]
        assert manager.state is ManagerState.DEPLOY_FAILED


class TestDescriptor:
    """Descriptor handling."""

    def test_descriptor_override_replaces_default(self, prod_config, fake_backend):
        options = ServiceManagerOptions(
            name="custom", description="Custom", dependencies=frozenset({"x"}), protected=False
        )

        manager = TwoResourceManager(prod_config, fake_backend, options=options)

        assert manager.name == "custom"
        assert manager.dependencies == frozenset({"x"})
        assert manager.resource_options().protect is False

    def test_stack_comes_from_current_environment(self, prod_config, fake_backend):
        manager = TwoResourceManager(prod_config, fake_backend)

        assert manager.stack == "prod"
        assert manager.resource_options().protect is True
