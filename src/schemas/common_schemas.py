"""Shared schema building blocks."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

JsonDecimal = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]
"""Decimal that leaves the API as a JSON number instead of a string."""


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str = Field(..., description="Outcome message")


class TypeListResponse(BaseModel):
    """Allowed values of one enumeration."""

    types: list[str] = Field(..., description="Allowed values")
