"""Actor context and tenant settings models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_PRIMARY_COLOR = "#4a75b5"


class Role(str, Enum):
    BARBER = "barber"
    CLIENT = "client"


@dataclass(frozen=True)
class ActorContext:
    """
    The resolved identity every dashboard service is constructed with.

    Built once at startup from the identity provider's session and passed
    explicitly; services never look up the actor or tenant on their own.
    """
    actor_id: str
    tenant_id: str
    role: Role = Role.BARBER

    @property
    def is_barber(self) -> bool:
        return self.role == Role.BARBER


class Tenant(BaseModel):
    """A shop account and its branding settings."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = ""
    subdomain: Optional[str] = ""
    logo_url: Optional[str] = None
    primary_color: Optional[str] = DEFAULT_PRIMARY_COLOR
