"""
CLI interface for trendmaps

Examples:
    trendmaps hacker --country US --filter CITY
    trendmaps PS4 XBOX PC --keyword PS4 --format csv
"""
import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from trendmaps.client import Client
from trendmaps.config import load_config
from trendmaps.errors import (
    InvalidFilterError,
    InvalidKeywordsError,
    KeywordNotSetError,
    TrendsError,
)
from trendmaps.frames import regions_to_frame
from trendmaps.geo import Country, Resolution
from trendmaps.region_interest import RegionInterest

logger = logging.getLogger(__name__)


def cmd_regions(args) -> int:
    """Print interest by region"""
    config = load_config(args.config)
    country = Country.from_code(args.country)

    client = Client(args.keywords, country, config=config)
    if args.period:
        client.with_period(args.period)
    client.build()

    interest = RegionInterest(client).with_low_volume(args.low_volume)
    if args.filter:
        interest.with_filter(args.filter)

    if args.keyword:
        regions = interest.get_for(args.keyword)
        columns = [args.keyword]
    else:
        regions = interest.get()
        columns = client.keywords.keywords

    if args.format == 'json':
        print(json.dumps([r.model_dump(by_alias=True, exclude_none=True) for r in regions], indent=2))
        return 0

    # Fall back to positional column names if the bucket count is unexpected
    if regions and len(regions[0].value) != len(columns):
        columns = None
    df = regions_to_frame(regions, columns)
    if args.format == 'csv':
        print(df.to_csv(index=False), end='')
    elif df.empty:
        print("No regional data returned")
    else:
        print(df.to_string(index=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='trendmaps',
        description='Google Trends interest by region'
    )
    parser.add_argument('keywords', nargs='+', help='Keywords to compare (at most 5)')
    parser.add_argument('--country', default='', help='ISO country code (default: all countries)')
    parser.add_argument(
        '--filter',
        choices=[r.value for r in Resolution],
        type=str.upper,
        help='Geographic resolution'
    )
    parser.add_argument('--period', help="Timeframe, e.g. 'today 3-m' or '2024-01-01 2024-06-30'")
    parser.add_argument('--keyword', help='Only show the map of this keyword')
    parser.add_argument('--low-volume', action='store_true', help='Include low search volume regions')
    parser.add_argument('--config', help='Path to a YAML config file')
    parser.add_argument('--format', choices=['table', 'json', 'csv'], default='table')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return cmd_regions(args)
    except (KeywordNotSetError, InvalidFilterError, InvalidKeywordsError) as e:
        logger.error(str(e))
        return 2
    except ValueError as e:
        # Unknown country code or malformed period
        logger.error(str(e))
        return 2
    except TrendsError as e:
        logger.error(f"Request failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
