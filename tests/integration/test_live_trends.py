"""
Live tests against trends.google.com.

Skipped unless TRENDS_LIVE_TESTS=1. Google rate limits aggressively, so a
429 here usually means "try again later" rather than a bug.
"""
import pytest

from trendmaps import Client, Country, Keywords, RegionInterest
from trendmaps.errors import KeywordNotSetError

pytestmark = pytest.mark.live


def test_hacker_in_us():
    """Test a live single keyword query in the US"""
    client = Client(Keywords(['hacker']), Country.US).build()

    regions = RegionInterest(client).get()

    assert regions
    for region in regions:
        assert len(region.value) == 1
        assert len(region.value) == len(region.has_data) == len(region.formatted_value)


def test_get_for_matches_raw_slot():
    """Test live get_for matches the raw slot worldwide"""
    client = Client(Keywords(['PS4', 'XBOX', 'PC']), Country.ALL).build()
    interest = RegionInterest(client)

    ps4 = interest.get_for('PS4')
    raw = client.send_request('GEO_MAP', overrides=interest._overrides(), slots=[1])[0]

    assert [r.geo_name for r in ps4] == [e['geoName'] for e in raw['default']['geoMapData']]

    with pytest.raises(KeywordNotSetError):
        interest.get_for('WII')
