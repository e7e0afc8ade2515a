"""
gmapsgeo - command line geocoding

Usage:
    gmapsgeo geocode "1600 Amphitheatre Parkway, Mountain View, CA"
    gmapsgeo reverse 40.714224 -73.961452

Credentials and the auth scheme come from the environment or a .env file
(see GeocoderConfig.from_env).

Exit codes:
    0  success
    1  request or configuration failure
    2  no results
"""

import argparse
import sys
from typing import List, Optional

from .config.config_module import load_config
from .config.logger_module import initialize_logger, log_error
from .geocoding.geocoding_client import GoogleGeocoder
from .geocoding.geocoding_config import GeocoderConfig
from .geocoding.geocoding_errors import GeocodingError, ZeroResultsError
from .geocoding.geocoding_types import GeoPoint

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_ZERO_RESULTS = 2


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="gmapsgeo",
        description="Geocode addresses and reverse geocode coordinates with the Google Maps API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s geocode "10 Downing St, London"
  %(prog)s reverse 51.5033635 -0.1276248
  %(prog)s --env-file prod.env --log-level DEBUG geocode Paris
        """
    )

    parser.add_argument('--env-file', type=str, default='.env',
                        help='Path to .env file with credentials (default: .env)')

    parser.add_argument('--base-url', type=str,
                        help='Override the geocoding endpoint URL')

    parser.add_argument('--log-level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='WARNING',
                        help='Logging level (default: WARNING)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    geocode_parser = subparsers.add_parser('geocode', help='Address to coordinates')
    geocode_parser.add_argument('address', help='Address to geocode')

    reverse_parser = subparsers.add_parser('reverse', help='Coordinates to address')
    reverse_parser.add_argument('lat', type=float, help='Latitude')
    reverse_parser.add_argument('lng', type=float, help='Longitude')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the gmapsgeo command."""
    args = parse_arguments(argv)

    initialize_logger(log_level=args.log_level)
    load_config(args.env_file)

    try:
        config = GeocoderConfig.from_env()
        if args.base_url:
            config = config.with_base_url(args.base_url)

        geocoder = GoogleGeocoder(config)

        if args.command == 'geocode':
            point, formatted_address = geocoder.geocode(args.address)
            print(formatted_address)
            print(f"{point.lat!r},{point.lng!r}")
        else:
            print(geocoder.reverse_geocode(GeoPoint(lat=args.lat, lng=args.lng)))

    except ZeroResultsError:
        print("No results found", file=sys.stderr)
        return EXIT_ZERO_RESULTS
    except GeocodingError as e:
        log_error(f"Geocoding failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
