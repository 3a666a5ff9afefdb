"""Tests for structured logging helpers."""

import logging
from unittest.mock import MagicMock

import pulumi

from platform_infra.core.report import ManagerStatus
from platform_infra.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Value conversion for log context."""

    def test_none(self):
        assert safe_log_value(None) == "None"

    def test_collections_are_summarised(self):
        assert safe_log_value(["a", "b"]) == "list(2 items)"
        assert safe_log_value(frozenset({"project-manager"})) == "frozenset(1 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_values_truncated(self):
        value = safe_log_value("x" * 20, max_length=5)

        assert value.startswith("xxxxx...")
        assert "20 total" in value

    def test_enums_render_their_value(self):
        assert safe_log_value(ManagerStatus.DEPLOY_FAILED) == "deploy-failed"

    def test_pulumi_objects_render_by_type(self):
        assert safe_log_value(MagicMock(spec=pulumi.Output)) == "<output>"
        assert safe_log_value(MagicMock(spec=pulumi.CustomResource)) == "<MagicMock>"


class TestLogWithContext:
    """Context attached to log records."""

    def test_context_becomes_record_attributes(self, caplog):
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, logging.INFO, "Deployment finished", deployed=3, failed=[])

        record = caplog.records[-1]
        assert record.deployed == "3"
        assert record.failed == "list(0 items)"

    def test_reserved_keys_are_prefixed(self, caplog):
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, logging.INFO, "Manager started", name="project-manager")

        assert caplog.records[-1].ctx_name == "project-manager"
        assert caplog.records[-1].name == "tests.log_utils"

    def test_exception_context(self, caplog):
        logger = logging.getLogger("tests.log_utils")
        error = RuntimeError("quota exceeded")

        log_exception_with_context(logger, "Failed to create resource", error, resource="main-vpc")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "RuntimeError"
        assert record.resource == "main-vpc"
        assert "quota exceeded" in record.getMessage()
