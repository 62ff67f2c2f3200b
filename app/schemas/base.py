from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON keys"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StrictCamelModel(CamelModel):
    """
    Request schema: camelCase keys only, unknown keys rejected.

    snake_case attribute names are not accepted on the wire.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=False)


# Upper bound of the 32-bit INTEGER columns (salary, num_employees, ids)
MAX_INT = 2147483647


def format_decimal(value: Any) -> Any:
    """Render a stored NUMERIC as a plain decimal string ("0.05", "1", "0")."""
    if isinstance(value, float):
        value = Decimal(str(value))
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    return value
