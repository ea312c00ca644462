"""
Google Trends client

A Client gathers the keywords, geography and options of a query. build()
registers the query with Google Trends and keeps the returned widgets;
send_request() then fetches the data behind those widgets.

Example:
    client = Client(Keywords(['PS4', 'XBOX']), Country.US).with_period(Period.PAST_90_DAYS).build()
    payloads = client.send_request('GEO_MAP')
    # [aggregate, PS4, XBOX]
"""
import copy
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from trendmaps.config import TrendsConfig, load_config
from trendmaps.errors import ClientNotBuiltError, SchemaMismatchError
from trendmaps.geo import Country
from trendmaps.keywords import Keywords
from trendmaps.options import Period, Property, period_value
from trendmaps.request_handler import WIDGET_ENDPOINTS, Query, RequestHandler

logger = logging.getLogger(__name__)


class Client:
    """
    Query builder and request dispatcher

    Option setters return the client so calls can be chained. Changing an
    option after build() discards the widgets, so the client has to be
    built again.
    """

    def __init__(
        self,
        keywords: Union[Keywords, Iterable[str]],
        country: Country = Country.ALL,
        config: Optional[TrendsConfig] = None,
        handler: Optional[RequestHandler] = None
    ):
        """
        Initialize the client

        Args:
            keywords: Keywords instance or iterable of terms
            country: Geography selector (default: worldwide)
            config: TrendsConfig (default: load_config())
            handler: RequestHandler to send requests through (optional)
        """
        self.keywords = keywords if isinstance(keywords, Keywords) else Keywords(keywords)
        self.country = country if isinstance(country, Country) else Country.from_code(country)
        self.config = config or load_config()
        self.handler = handler or RequestHandler(self.config)

        self.lang = self.config.hl
        self.tz = self.config.tz
        self.category = 0
        self.period: str = self.config.default_period
        self.property = Property.WEB

        self._widgets: Optional[List[Dict[str, Any]]] = None

    def _reset(self) -> None:
        if self._widgets is not None:
            logger.debug("Client options changed, widgets discarded")
        self._widgets = None

    def with_lang(self, hl: str) -> 'Client':
        self.lang = hl
        self._reset()
        return self

    def with_timezone(self, tz: int) -> 'Client':
        self.tz = int(tz)
        self._reset()
        return self

    def with_category(self, category: int) -> 'Client':
        self.category = int(category)
        self._reset()
        return self

    def with_period(self, period: Union[Period, str]) -> 'Client':
        self.period = period_value(period)
        self._reset()
        return self

    def with_property(self, property: Property) -> 'Client':
        self.property = Property(property)
        self._reset()
        return self

    @property
    def is_built(self) -> bool:
        return self._widgets is not None

    def query(self) -> Query:
        """Query describing the current options"""
        return Query(
            keywords=self.keywords.keywords,
            geo=self.country.value,
            period=self.period,
            category=self.category,
            property=self.property.value,
            hl=self.lang,
            tz=self.tz
        )

    def build(self) -> 'Client':
        """
        Register the query with Google Trends

        Returns:
            The built client
        """
        self._widgets = self.handler.explore(self.query())
        logger.info(
            f"Client built for {self.keywords.keywords} "
            f"(geo={self.country.value or 'ALL'}, period={self.period})"
        )
        return self

    def slot_count(self) -> int:
        """Number of response slots: the aggregate plus one per keyword"""
        return 1 + len(self.keywords)

    def slot_keyword(self, slot: int) -> Optional[str]:
        """Keyword a response slot belongs to, None for the aggregate"""
        if slot == 0:
            return None
        return self.keywords.keywords[slot - 1]

    def _widget_for_slot(self, widget: str, slot: int) -> Dict[str, Any]:
        by_id = {w.get('id'): w for w in self._widgets}

        if slot == 0:
            widget_id = widget
        else:
            widget_id = f"{widget}_{slot - 1}"
            # Single keyword queries only get the aggregate widget
            if widget_id not in by_id and len(self.keywords) == 1:
                widget_id = widget

        if widget_id not in by_id:
            logger.error(f"Widget {widget_id} missing from explore response")
            raise SchemaMismatchError(f"Explore response has no {widget_id} widget")
        return by_id[widget_id]

    def send_request(
        self,
        widget: str = 'GEO_MAP',
        overrides: Optional[Dict[str, Any]] = None,
        slots: Optional[Iterable[int]] = None
    ) -> List[Any]:
        """
        Fetch the data behind a kind of widget

        Args:
            widget: Widget kind, e.g. 'GEO_MAP'
            overrides: Keys merged into each widget request before sending
            slots: Response slots to fetch (default: all, aggregate first)

        Returns:
            One decoded JSON payload per requested slot, in slot order

        Raises:
            ClientNotBuiltError: if build() has not been called
            IndexError: if a slot is out of range
        """
        if not self.is_built:
            raise ClientNotBuiltError()
        if widget not in WIDGET_ENDPOINTS:
            raise ValueError(f"Unsupported widget kind: {widget}")

        wanted = list(range(self.slot_count())) if slots is None else list(slots)
        for slot in wanted:
            if not 0 <= slot < self.slot_count():
                raise IndexError(f"Response slot {slot} out of range (0..{self.slot_count() - 1})")

        payloads = []
        for slot in wanted:
            source = self._widget_for_slot(widget, slot)
            # Copy so overrides never leak into the stored widgets
            request_widget = copy.deepcopy(source)
            if overrides:
                request_widget.setdefault('request', {}).update(overrides)
            payloads.append(
                self.handler.widget_data(WIDGET_ENDPOINTS[widget], request_widget, tz=self.tz)
            )

        logger.info(f"Fetched {len(payloads)} {widget} payloads for {self.keywords.keywords}")
        return payloads

    def __repr__(self) -> str:
        return (
            f"Client(keywords={self.keywords.keywords!r}, country={self.country.name}, "
            f"period={self.period!r}, built={self.is_built})"
        )
