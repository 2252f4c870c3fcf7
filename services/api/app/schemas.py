"""Pydantic schemas for the Unit Converter API.

Request/response models for:
- Conversions (one shape shared by every category)

Wire names are camelCase; snake_case is accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field


# --- Conversion ---

class ConversionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value: float
    from_unit: str = Field(alias="fromUnit")
    to_unit: str = Field(alias="toUnit")


class ConversionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    result: float
    original_value: float = Field(alias="originalValue")
    from_unit: str = Field(alias="fromUnit")
    to_unit: str = Field(alias="toUnit")
    from_unit_symbol: str = Field(alias="fromUnitSymbol")
    to_unit_symbol: str = Field(alias="toUnitSymbol")


# --- Health ---

class ReadyResponse(BaseModel):
    ok: bool
