"""Tests for tenant-aware logging."""

import logging

from shopcal.logging_context import TenantIdFilter, get_tenant_id, get_tenant_logger, set_tenant_id


class TestTenantLogging:
    def test_filter_stamps_record(self):
        set_tenant_id("shop-9")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert TenantIdFilter().filter(record)
        assert record.tenant_id == "shop-9"
        assert get_tenant_id() == "shop-9"

    def test_filter_attached_once(self):
        first = get_tenant_logger("shopcal.test")
        second = get_tenant_logger("shopcal.test")
        assert first is second
        assert sum(isinstance(f, TenantIdFilter) for f in first.filters) == 1

    def test_caplog_sees_tenant(self, caplog):
        set_tenant_id("shop-3")
        logger = get_tenant_logger("shopcal.test.caplog")
        with caplog.at_level(logging.INFO, logger="shopcal.test.caplog"):
            logger.info("hello")
        assert caplog.records[-1].tenant_id == "shop-3"
