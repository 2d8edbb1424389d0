"""Shop settings form: business name, subdomain, logo and brand color."""

import re
from typing import Optional

from pydantic import BaseModel, field_validator

from shopcal.logging_context import get_tenant_logger
from shopcal.schemas.session_schema import DEFAULT_PRIMARY_COLOR, ActorContext, Tenant
from shopcal.services.calendar_service import ActionResult
from shopcal.stores.base import DataSource
from shopcal.stores.errors import StoreError

logger = get_tenant_logger(__name__)

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
SUBDOMAIN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


class TenantSettingsForm(BaseModel):
    """Editable shop settings with their validation rules."""

    name: str = ""
    subdomain: str = ""
    logo_url: str = ""
    primary_color: str = DEFAULT_PRIMARY_COLOR

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("subdomain")
    @classmethod
    def _check_subdomain(cls, value: str) -> str:
        value = value.strip().lower()
        if value and not SUBDOMAIN.match(value):
            raise ValueError("Subdomain may only contain letters, digits and hyphens.")
        return value

    @field_validator("primary_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError("Primary color must look like #4a75b5.")
        return value.lower()

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantSettingsForm":
        return cls(
            name=tenant.name or "",
            subdomain=tenant.subdomain or "",
            logo_url=tenant.logo_url or "",
            primary_color=tenant.primary_color or DEFAULT_PRIMARY_COLOR,
        )


class TenantSettings:
    """Loads and saves the current shop's settings."""

    def __init__(self, actor: ActorContext, source: DataSource) -> None:
        self.actor = actor
        self.source = source
        self.tenant: Optional[Tenant] = None

    def load(self) -> TenantSettingsForm:
        """
        Current settings, or defaults when the shop cannot be loaded.
        """
        try:
            self.tenant = self.source.get_tenant(self.actor.tenant_id)
        except StoreError as exc:
            logger.error("Error fetching tenant: %s", exc)
            self.tenant = None
            return TenantSettingsForm()
        return TenantSettingsForm.from_tenant(self.tenant)

    def save(self, form: TenantSettingsForm) -> ActionResult:
        if self.tenant is None:
            return {"success": False, "message": "No shop loaded."}
        try:
            self.tenant = self.source.update_tenant(self.tenant.id, form.model_dump())
        except StoreError as exc:
            logger.error("Error saving settings: %s", exc)
            return {"success": False, "message": "Failed to save settings"}
        logger.info("Settings saved for tenant %s", self.tenant.id)
        return {"success": True, "message": "Settings saved successfully!"}
