"""Service and client catalog models."""

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Service(BaseModel):
    """A bookable service offered by the shop."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    duration_minutes: int = Field(gt=0, validation_alias=AliasChoices("duration_minutes", "duration"))
    price: Decimal = Field(ge=0)


class Client(BaseModel):
    """Client profile as seen by a barber."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    notes: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
