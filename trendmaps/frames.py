"""
pandas helpers for geo map results
"""
from typing import List, Optional, Sequence

import pandas as pd

from trendmaps.models import InterestForRegion


def regions_to_frame(
    regions: List[InterestForRegion],
    keywords: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """
    Convert decoded regions to a DataFrame

    Args:
        regions: Entries returned by RegionInterest
        keywords: Column names for the value buckets (default keyword_<i>)

    Returns:
        DataFrame with geoName, geoCode/lat/lng when present and one
        column per compared keyword
    """
    if not regions:
        return pd.DataFrame()

    bucket_count = len(regions[0].value)
    if keywords is None:
        keywords = [f"keyword_{i}" for i in range(bucket_count)]
    elif len(keywords) != bucket_count:
        raise ValueError(f"Got {len(keywords)} keyword names for {bucket_count} value buckets")

    df_data = {'geoName': [r.geo_name for r in regions]}
    if any(r.geo_code for r in regions):
        df_data['geoCode'] = [r.geo_code for r in regions]
    if any(r.coordinates for r in regions):
        df_data['lat'] = [r.coordinates.lat if r.coordinates else None for r in regions]
        df_data['lng'] = [r.coordinates.lng if r.coordinates else None for r in regions]

    for i, keyword in enumerate(keywords):
        df_data[keyword] = [r.value[i] if i < len(r.value) else None for r in regions]

    return pd.DataFrame(df_data)
