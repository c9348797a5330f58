from pydantic import Field

from boardcamp.schemas.base import CamelModel


class Category(CamelModel):
    id: int
    name: str


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
