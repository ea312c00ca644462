"""
trendmaps - Google Trends interest by region

Provides typed access to the geo map data of the Google Trends web UI.
"""
from trendmaps.client import Client
from trendmaps.config import TrendsConfig, load_config
from trendmaps.errors import (
    ClientNotBuiltError,
    InvalidFilterError,
    InvalidKeywordsError,
    KeywordNotSetError,
    ResponseError,
    SchemaMismatchError,
    TooManyRequestsError,
    TrendsError,
)
from trendmaps.frames import regions_to_frame
from trendmaps.geo import Country, Resolution
from trendmaps.keywords import Keywords
from trendmaps.models import Coordinates, InterestForRegion, RegionInterestResponse
from trendmaps.options import Period, Property
from trendmaps.region_interest import RegionInterest

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientNotBuiltError",
    "Coordinates",
    "Country",
    "InterestForRegion",
    "InvalidFilterError",
    "InvalidKeywordsError",
    "KeywordNotSetError",
    "Keywords",
    "Period",
    "Property",
    "RegionInterest",
    "RegionInterestResponse",
    "Resolution",
    "ResponseError",
    "SchemaMismatchError",
    "TooManyRequestsError",
    "TrendsConfig",
    "TrendsError",
    "load_config",
    "regions_to_frame",
]
