"""Peak Schemas - Pydantic models for the /peaks endpoints.

Invariants:
    - Request fields accept lower-case and PascalCase keys (name / Name)
    - PeakCreate.height is passed through untouched (no lax coercion of true,
      5642.5, ...): parse_height is the only place that judges it and every
      failure surfaces as INVALID_HEIGHT
    - coordinates default to "" - empty coordinates are valid
    - Responses always use lower-case keys and include the stable id
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PeakCreate(BaseModel):
    """Create request - accepts the {Name, Country, Height, Coordinates} body."""
    name: str = Field("", validation_alias=AliasChoices("name", "Name"))
    country: str = Field("", validation_alias=AliasChoices("country", "Country"))
    height: Any = Field(
        None, validation_alias=AliasChoices("height", "Height"),
    )
    coordinates: str | None = Field(
        "", validation_alias=AliasChoices("coordinates", "Coordinates"),
    )


class CoordinatesUpdate(BaseModel):
    """Update request - coordinates are the only mutable field."""
    coordinates: str | None = Field(
        "", validation_alias=AliasChoices("coordinates", "Coordinates"),
    )


class PeakResponse(BaseModel):
    """Public peak representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    country: str
    height: int
    coordinates: str
