from decimal import Decimal

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator

from boardcamp.schemas.base import MAX_INT, CamelModel, ResourceId

_url_adapter = TypeAdapter(AnyUrl)


class Game(CamelModel):
    id: int
    name: str
    image: str
    stock_total: int
    category_id: int
    category_name: str | None = None
    price_per_day: float


class GameCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    image: str = Field(..., description="Absolute image URI, or an empty string")
    stock_total: int = Field(
        ..., strict=True, ge=1, le=MAX_INT, description="Copies available (must be >= 1)"
    )
    category_id: ResourceId
    price_per_day: Decimal = Field(
        ..., ge=1, max_digits=10, decimal_places=2, description="Daily price (must be >= 1)"
    )

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        """Accept an empty string or an absolute URI, stored exactly as sent."""
        if v == "":
            return v
        try:
            _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("image must be a valid URI or an empty string")
        return v

    @field_validator("price_per_day", mode="before")
    @classmethod
    def reject_boolean_price(cls, v):
        if isinstance(v, bool):
            raise ValueError("pricePerDay must be a number")
        return v
