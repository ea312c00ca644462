"""
Google Trends geo maps

See in which locations a keyword was most popular during the query period.
Values are on a scale from 0 to 100 where 100 is the location with the most
popularity as a fraction of total searches in that location; 50 means half
as popular. 0 means there was not enough data for the term.

Example usage:
    client = Client(Keywords(['PS4', 'XBOX', 'PC']), Country.US).build()
    interest = RegionInterest(client).with_filter('CITY')

    everything = interest.get()        # keywords compared together
    ps4_only = interest.get_for('PS4')  # one keyword's map
"""
import logging
from typing import Dict, List, Union

from trendmaps.client import Client
from trendmaps.errors import ClientNotBuiltError, InvalidFilterError
from trendmaps.geo import Country, Resolution
from trendmaps.models import InterestForRegion, RegionInterestResponse, decode_region_interest

logger = logging.getLogger(__name__)

WIDGET = 'GEO_MAP'


def _parse_resolution(scale: Union[Resolution, str]) -> Resolution:
    if isinstance(scale, Resolution):
        return scale
    try:
        return Resolution(str(scale).strip().upper())
    except ValueError:
        valid = ', '.join(r.value for r in Resolution)
        raise InvalidFilterError(f"Unknown filter {scale!r}, expected one of {valid}") from None


class RegionInterest:
    """
    Interest by region for the keywords of a built client

    When the client queries all countries the filter defaults to COUNTRY,
    otherwise to REGION.
    """

    def __init__(self, client: Client):
        """
        Wrap a client

        Args:
            client: A built Client

        Raises:
            ClientNotBuiltError: if client.build() has not been called
        """
        if not client.is_built:
            raise ClientNotBuiltError()

        self.client = client
        self.resolution = Resolution.COUNTRY if client.country == Country.ALL else Resolution.REGION
        self.include_low_volume = False

    def with_filter(self, scale: Union[Resolution, str]) -> 'RegionInterest':
        """
        Set the geographic resolution of the map

        Use REGION or CITY within a country, DMA for US metro areas and
        COUNTRY when querying all countries. Worldwide maps are labelled by
        country, so REGION cannot be used with Country.ALL.

        Raises:
            InvalidFilterError: on an unknown filter or one the client's
                geography does not support
        """
        resolution = _parse_resolution(scale)
        worldwide = self.client.country == Country.ALL

        if worldwide and resolution == Resolution.REGION:
            raise InvalidFilterError(
                "REGION cannot be used when querying all countries; "
                "use COUNTRY or keep the default filter"
            )
        if not worldwide and resolution == Resolution.COUNTRY:
            raise InvalidFilterError(
                f"COUNTRY filter needs Country.ALL, client is scoped to {self.client.country.value}"
            )
        if resolution == Resolution.DMA and self.client.country != Country.US:
            raise InvalidFilterError("DMA filter is only available for Country.US")

        self.resolution = resolution
        return self

    def with_low_volume(self, include: bool = True) -> 'RegionInterest':
        """Include regions with a low search volume"""
        self.include_low_volume = include
        return self

    def _overrides(self) -> Dict:
        return {
            'resolution': self.resolution.value,
            'includeLowSearchVolumeGeos': self.include_low_volume,
        }

    def _fetch(self, slots: List[int]) -> List[RegionInterestResponse]:
        payloads = self.client.send_request(WIDGET, overrides=self._overrides(), slots=slots)
        return [
            decode_region_interest(payload, keyword=self.client.slot_keyword(slot))
            for slot, payload in zip(slots, payloads)
        ]

    def get(self) -> List[InterestForRegion]:
        """
        Map data for all keywords compared together

        Returns:
            List of InterestForRegion, one bucket per keyword in each entry
        """
        response = self._fetch([0])[0]
        logger.info(f"Fetched {len(response.regions)} {self.resolution.value} entries")
        return response.regions

    def get_for(self, keyword: str) -> List[InterestForRegion]:
        """
        Map data for one keyword set on the client

        Raises:
            KeywordNotSetError: if the keyword was not registered
        """
        slot = self.client.keywords.index(keyword) + 1
        response = self._fetch([slot])[0]
        logger.info(f"Fetched {len(response.regions)} {self.resolution.value} entries for '{keyword}'")
        return response.regions

    def get_all(self) -> List[RegionInterestResponse]:
        """Every slot, aggregate first, each tagged with its keyword"""
        return self._fetch(list(range(self.client.slot_count())))

    def get_by_keyword(self) -> Dict[str, List[InterestForRegion]]:
        """Per-keyword maps keyed by keyword, in registration order"""
        slots = list(range(1, self.client.slot_count()))
        return {response.keyword: response.regions for response in self._fetch(slots)}
