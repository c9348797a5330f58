from datetime import date

from pydantic import Field, field_validator

from boardcamp.schemas.base import CamelModel


class Customer(CamelModel):
    id: int
    name: str
    phone: str
    cpf: str
    birthday: date | None = None


class CustomerCreate(CamelModel):
    """Payload for both creating and fully updating a customer."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., pattern=r"^[0-9]{10,11}$", description="10 or 11 digits")
    cpf: str = Field(..., pattern=r"^[0-9]{11}$", description="Exactly 11 digits")
    birthday: date | None = None

    @field_validator("birthday")
    @classmethod
    def validate_birthday(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("birthday cannot be in the future")
        return v


CustomerUpdate = CustomerCreate
