"""Definition registry schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.definition import Definition


class DefinitionRequest(BaseModel):
    """Create/update payload; blank name or abbreviation is rejected by the handler."""

    name: str = Field(..., max_length=255, examples=["Bitcoin"])
    abbreviation: str = Field(..., max_length=50, examples=["BTC"])
    suffix: str = Field(default="", max_length=50, examples=["BTC"])


class DefinitionResponse(BaseModel):
    id: UUID
    name: str
    abbreviation: str
    suffix: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, definition: Definition) -> "DefinitionResponse":
        return cls(
            id=definition.id,
            name=definition.name,
            abbreviation=definition.abbreviation,
            suffix=definition.suffix,
            created_at=definition.created_at,
            updated_at=definition.updated_at,
        )


class DefinitionListResponse(BaseModel):
    definitions: list[DefinitionResponse]
    count: int

    @classmethod
    def from_entities(cls, definitions: list[Definition]) -> "DefinitionListResponse":
        return cls(
            definitions=[DefinitionResponse.from_entity(d) for d in definitions],
            count=len(definitions),
        )
