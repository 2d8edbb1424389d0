"""Tenant-aware logging context.

Attaches the active tenant id to every log record so messages from the
calendar, stores and dashboard services can be traced back to a shop.

Usage:
    from shopcal.logging_context import get_tenant_logger, set_tenant_id

    set_tenant_id("tenant-7")
    logger = get_tenant_logger(__name__)
    logger.info("Loaded appointments")  # record.tenant_id == "tenant-7"
"""

import logging
from contextvars import ContextVar

_tenant_id: ContextVar[str] = ContextVar("tenant_id", default="NO_TENANT")


def set_tenant_id(tenant_id: str) -> None:
    """Set the tenant id for the current context."""
    _tenant_id.set(tenant_id)


def get_tenant_id() -> str:
    """Retrieve the current tenant id."""
    return _tenant_id.get()


class TenantIdFilter(logging.Filter):
    """Injects tenant_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.tenant_id = _tenant_id.get()  # type: ignore[attr-defined]
        return True


def get_tenant_logger(name: str) -> logging.Logger:
    """Return a logger with the TenantIdFilter attached.

    Formatters can then include ``%(tenant_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, TenantIdFilter) for f in logger.filters):
        logger.addFilter(TenantIdFilter())
    return logger
