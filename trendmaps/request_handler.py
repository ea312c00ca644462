"""
HTTP transport for the Google Trends web API

Google Trends has no public API. The web UI first POSTs the query to the
explore endpoint, which answers with a list of widgets. Each widget carries a
request description and a short-lived token; the data behind a widget is then
fetched from /trends/api/widgetdata/<kind> with that request and token.

Every response body starts with an anti-XSSI guard (")]}'" or ")]}',")
that must be removed before the JSON can be parsed.

Example usage:
    handler = RequestHandler()
    query = Query(keywords=['python'], geo='US')
    widgets = handler.explore(query)
    data = handler.widget_data('comparedgeo', widgets[1], tz=query.tz)
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from trendmaps.config import TrendsConfig
from trendmaps.errors import ResponseError, SchemaMismatchError, TooManyRequestsError

logger = logging.getLogger(__name__)

EXPLORE_PATH = '/trends/api/explore'
WIDGET_DATA_PATH = '/trends/api/widgetdata'
COOKIE_PATH = '/trends/explore'

# Widget id prefix -> widgetdata endpoint serving it
WIDGET_ENDPOINTS = {
    'GEO_MAP': 'comparedgeo',
}

XSSI_GUARD = ")]}'"


@dataclass(frozen=True)
class Query:
    """Everything the explore endpoint needs to describe one comparison"""
    keywords: List[str]
    geo: str = ''
    period: str = 'today 12-m'
    category: int = 0
    property: str = ''
    hl: str = 'en-US'
    tz: int = 360

    def comparison_items(self) -> List[Dict[str, str]]:
        return [
            {'keyword': keyword, 'time': self.period, 'geo': self.geo}
            for keyword in self.keywords
        ]

    def to_payload(self) -> Dict[str, Any]:
        """Query-string parameters of the explore request"""
        req = {
            'comparisonItem': self.comparison_items(),
            'category': self.category,
            'property': self.property,
        }
        return {
            'hl': self.hl,
            'tz': self.tz,
            'req': json.dumps(req, separators=(',', ':')),
        }


def strip_xssi_guard(text: str) -> str:
    """Remove the ")]}'" prefix (and the comma some endpoints add after it)"""
    body = text.lstrip()
    if body.startswith(XSSI_GUARD):
        body = body[len(XSSI_GUARD):].lstrip()
        if body.startswith(','):
            body = body[1:]
    return body


@dataclass
class RequestHandler:
    """
    Thin wrapper around a requests.Session talking to trends.google.com

    The session picks up Google's NID cookie on first use; requests issued
    without it are frequently answered with 429.
    """
    config: TrendsConfig = field(default_factory=TrendsConfig)
    session: Optional[requests.Session] = None

    def __post_init__(self):
        if self.session is None:
            self.session = requests.Session()
            self.session.headers.update({
                'User-Agent': self.config.user_agent,
                'Accept': 'application/json, text/plain, */*',
                'Accept-Language': self.config.hl,
            })
            if self.config.proxies:
                self.session.proxies.update(self.config.proxies)
        self._has_cookie = False

    def _url(self, path: str) -> str:
        return self.config.base_url.rstrip('/') + path

    def _ensure_cookie(self) -> None:
        """Load the NID cookie once per session"""
        if self._has_cookie:
            return
        geo = self.config.hl[-2:]
        try:
            self.session.get(
                self._url(COOKIE_PATH),
                params={'geo': geo},
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            raise ResponseError(f"Could not reach Google Trends: {e}") from e
        self._has_cookie = True
        logger.debug(f"Session cookies initialised: {sorted(self.session.cookies.keys())}")

    def _get_json(self, method: str, path: str, params: Dict[str, Any]) -> Any:
        """Send one request and parse the guarded JSON body"""
        self._ensure_cookie()
        url = self._url(path)
        logger.debug(f"{method.upper()} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ResponseError(f"Request to {url} failed: {e}") from e

        if response.status_code == 429:
            logger.error(f"Rate limited by Google Trends on {url}")
            raise TooManyRequestsError.from_response(response)
        if response.status_code != 200:
            logger.error(f"Google Trends returned {response.status_code} for {url}")
            raise ResponseError.from_response(response)

        try:
            return json.loads(strip_xssi_guard(response.text))
        except ValueError as e:
            raise SchemaMismatchError(f"Response from {url} is not JSON: {e}") from e

    def explore(self, query: Query) -> List[Dict[str, Any]]:
        """
        Register a query and return its widgets

        Args:
            query: Query to send

        Returns:
            List of widget dicts, each with at least 'id', 'request' and 'token'
        """
        data = self._get_json('post', EXPLORE_PATH, query.to_payload())
        if not isinstance(data, dict) or not isinstance(data.get('widgets'), list):
            raise SchemaMismatchError("Explore response has no 'widgets' list")

        widgets = data['widgets']
        logger.info(f"Explore returned {len(widgets)} widgets for {query.keywords}")
        return widgets

    def widget_data(self, endpoint: str, widget: Dict[str, Any], tz: int) -> Any:
        """
        Fetch the data behind one widget

        Args:
            endpoint: widgetdata endpoint, e.g. 'comparedgeo'
            widget: Widget dict as returned by explore(), request possibly edited
            tz: Timezone offset in minutes

        Returns:
            Decoded JSON payload
        """
        try:
            params = {
                'req': json.dumps(widget['request'], separators=(',', ':')),
                'token': widget['token'],
                'tz': tz,
            }
        except KeyError as e:
            raise SchemaMismatchError(f"Widget {widget.get('id')!r} is missing {e}") from e

        return self._get_json('get', f"{WIDGET_DATA_PATH}/{endpoint}", params)
