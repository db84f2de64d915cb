from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Country(str, Enum):
    # Declaration order is the lookup table order.
    FRANCE = "France"
    GERMANY = "Germany"
    ITALY = "Italy"
    SPAIN = "Spain"
    SWITZERLAND = "Switzerland"
    USA = "USA"


class EarlyDateCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int = Field(examples=[1980])
    month: int = Field(ge=1, le=12, examples=[1])


class LocatedDateCode(BaseModel):
    """Decoded late-1980s or 1990s code: date plus factory location."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(examples=[1990])
    month: int = Field(ge=1, le=12, examples=[1])
    location_code: str = Field(min_length=2, max_length=2, examples=["TH"])
    countries: Tuple[Country, ...] = Field(default_factory=tuple)
