"""
Tests for geo map decoding
"""
import pytest

from trendmaps.errors import SchemaMismatchError
from trendmaps.models import InterestForRegion, decode_region_interest
from tests.fixtures.trends_payloads import AGGREGATE_US, CITY_US, geo_payload, region_entry


class TestDecodeRegionInterest:
    """Test suite for decode_region_interest"""

    def test_decodes_region_entries(self):
        """Test aggregate entries decode with one bucket per keyword"""
        response = decode_region_interest(AGGREGATE_US)

        assert response.keyword is None
        assert [r.geo_name for r in response.regions] == ['California', 'Texas', 'Wyoming']

        california = response.regions[0]
        assert california.geo_code == 'US-CA'
        assert california.value == [45, 30, 25]
        assert california.has_data == [True, True, True]
        assert california.formatted_value == ['45', '30', '25']
        assert california.max_value_index == 0
        assert california.coordinates is None

    def test_decodes_city_coordinates(self):
        """Test city entries carry coordinates"""
        response = decode_region_interest(CITY_US, keyword='hacker')

        assert response.keyword == 'hacker'
        assert response.regions[0].coordinates.lat == pytest.approx(37.77)
        assert response.regions[0].coordinates.lng == pytest.approx(-122.42)

    def test_zero_means_no_data(self):
        """Test zero values are flagged as missing data"""
        wyoming = decode_region_interest(AGGREGATE_US).regions[2]

        assert wyoming.value == [0, 0, 0]
        assert wyoming.has_data == [False, False, False]

    def test_parallel_arrays_have_equal_length(self):
        """Test value, hasData and formattedValue line up"""
        for region in decode_region_interest(AGGREGATE_US).regions:
            assert len(region.value) == len(region.has_data) == len(region.formatted_value)

    def test_empty_map(self):
        """Test an empty geo map decodes to no regions"""
        assert decode_region_interest(geo_payload([])).regions == []

    def test_ignores_unknown_fields(self):
        """Test unknown wire fields are ignored"""
        entry = region_entry('Texas', [12], code='US-TX')
        entry['newUpstreamField'] = 'x'

        response = decode_region_interest(geo_payload([entry]))

        assert response.regions[0].geo_name == 'Texas'

    def test_mismatched_array_lengths(self):
        """Test parallel arrays of different lengths raise SchemaMismatchError"""
        entry = region_entry('Texas', [12, 40], code='US-TX')
        entry['hasData'] = [True]

        with pytest.raises(SchemaMismatchError, match='schema v1'):
            decode_region_interest(geo_payload([entry]))

    def test_max_value_index_out_of_range(self):
        """Test maxValueIndex must point at a bucket"""
        entry = region_entry('Texas', [12], code='US-TX')
        entry['maxValueIndex'] = 3

        with pytest.raises(SchemaMismatchError):
            decode_region_interest(geo_payload([entry]))

    @pytest.mark.parametrize('payload', [
        {},
        {'default': {'geoMapData': [{'value': [1]}]}},
        {'default': {'geoMapData': 'oops'}},
    ])
    def test_schema_mismatch(self, payload):
        """Test malformed payloads raise SchemaMismatchError"""
        with pytest.raises(SchemaMismatchError):
            decode_region_interest(payload)

    def test_rejects_non_object(self):
        """Test payloads that are not objects are rejected"""
        with pytest.raises(SchemaMismatchError, match='Expected a JSON object'):
            decode_region_interest([AGGREGATE_US])


class TestInterestForRegion:
    """Test suite for InterestForRegion"""

    def test_accepts_python_names(self):
        """Test models can be built with snake_case names"""
        region = InterestForRegion(geo_name='Texas', value=[1], has_data=[True], formatted_value=['1'])
        assert region.max_value_index == 0

    def test_dumps_wire_names(self):
        """Test models dump camelCase wire names"""
        region = decode_region_interest(AGGREGATE_US).regions[0]
        dumped = region.model_dump(by_alias=True, exclude_none=True)

        assert dumped['geoName'] == 'California'
        assert dumped['hasData'] == [True, True, True]
        assert 'coordinates' not in dumped
