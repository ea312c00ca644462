"""
Query options: time range and search property
"""
from datetime import date
from enum import Enum
from typing import Union


class Period(str, Enum):
    """Predefined time ranges understood by Google Trends"""
    PAST_HOUR = "now 1-H"
    PAST_4_HOURS = "now 4-H"
    PAST_DAY = "now 1-d"
    PAST_7_DAYS = "now 7-d"
    PAST_30_DAYS = "today 1-m"
    PAST_90_DAYS = "today 3-m"
    PAST_12_MONTHS = "today 12-m"
    PAST_5_YEARS = "today 5-y"
    SINCE_2004 = "all"

    @staticmethod
    def between(start: Union[date, str], end: Union[date, str]) -> str:
        """
        Custom date range in the 'YYYY-MM-DD YYYY-MM-DD' wire form

        Raises:
            ValueError: if start is after end
        """
        start_date = date.fromisoformat(start) if isinstance(start, str) else start
        end_date = date.fromisoformat(end) if isinstance(end, str) else end
        if start_date > end_date:
            raise ValueError(f"Period start {start_date} is after end {end_date}")
        return f"{start_date.isoformat()} {end_date.isoformat()}"


class Property(str, Enum):
    """Google property the searches are counted on"""
    WEB = ""
    IMAGES = "images"
    NEWS = "news"
    SHOPPING = "froogle"
    YOUTUBE = "youtube"


def period_value(period: Union[Period, str]) -> str:
    """Wire value of a Period member or a raw timeframe string"""
    if isinstance(period, Period):
        return period.value
    return str(period)
