from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest value an INTEGER column holds on every supported backend
MAX_INT = 2_147_483_647

# Row references: JSON integers only (booleans rejected), within column range
ResourceId = Annotated[int, Field(strict=True, ge=1, le=MAX_INT)]


class CamelModel(BaseModel):
    """Base schema exposing snake_case fields as camelCase JSON keys.

    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
