"""
Typed models for Google Trends geo map payloads

The comparedgeo endpoint answers with:

    {"default": {"geoMapData": [
        {"geoCode": "US-CA", "geoName": "California",
         "value": [100], "formattedValue": ["100"], "hasData": [true],
         "maxValueIndex": 0},
        ...
    ]}}

City resolution returns ``coordinates: {lat, lng}`` instead of ``geoCode``.
Each array holds one bucket per compared keyword.

The layout is reverse engineered; decode_region_interest() is the only place
that knows it, and GEO_MAP_SCHEMA_VERSION names the revision being decoded.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from trendmaps.errors import SchemaMismatchError

GEO_MAP_SCHEMA_VERSION = 1


class WireModel(BaseModel):
    """Base for models read from camelCase payloads"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


class Coordinates(WireModel):
    lat: float
    lng: float


class InterestForRegion(WireModel):
    """
    Interest for one geographic entry

    Values are on a 0-100 scale relative to the most popular location;
    0 means there was not enough data for this term.
    """
    geo_name: str
    geo_code: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    value: List[int] = Field(default_factory=list)
    has_data: List[bool] = Field(default_factory=list)
    formatted_value: List[str] = Field(default_factory=list)
    max_value_index: int = Field(0, ge=0)

    @model_validator(mode='after')
    def check_parallel_arrays(self) -> 'InterestForRegion':
        lengths = {len(self.value), len(self.has_data), len(self.formatted_value)}
        if len(lengths) != 1:
            raise ValueError(
                f"value, hasData and formattedValue differ in length for {self.geo_name!r}"
            )
        if self.value and self.max_value_index >= len(self.value):
            raise ValueError(
                f"maxValueIndex {self.max_value_index} out of range for {self.geo_name!r}"
            )
        return self


class GeoMapData(WireModel):
    geo_map_data: List[InterestForRegion] = Field(default_factory=list)


class RegionInterestResponse(BaseModel):
    """
    One decoded response slot

    ``keyword`` is None for the aggregate slot and the registered keyword
    for the per-keyword slots.
    """
    default: GeoMapData
    keyword: Optional[str] = None

    @property
    def regions(self) -> List[InterestForRegion]:
        return self.default.geo_map_data


def decode_region_interest(payload: Any, keyword: Optional[str] = None) -> RegionInterestResponse:
    """
    Decode a comparedgeo payload

    Args:
        payload: JSON payload returned by the widgetdata endpoint
        keyword: Keyword the slot belongs to (None for the aggregate)

    Returns:
        RegionInterestResponse

    Raises:
        SchemaMismatchError: if the payload does not match the layout
    """
    if not isinstance(payload, dict):
        raise SchemaMismatchError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    try:
        return RegionInterestResponse.model_validate({**payload, 'keyword': keyword})
    except ValidationError as e:
        raise SchemaMismatchError(
            f"Geo map payload does not match schema v{GEO_MAP_SCHEMA_VERSION}: {e}"
        ) from e
