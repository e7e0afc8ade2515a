"""
Google Maps Geocoding API client.

Builds the query for a forward or reverse geocode, lets the configured
authentication scheme finish it, sends it with a requests session and
interprets the JSON body.
"""

from typing import Optional

import requests

from ..config.logger_module import log_info, log_warning, log_error
from .geocoding_config import GeocoderConfig
from .geocoding_errors import GeocodingError, TransportError, ZeroResultsError
from .geocoding_query import build_geocode_query, build_reverse_geocode_query, with_sensor
from .geocoding_response import parse_geocode_response, parse_reverse_geocode_response
from .geocoding_types import GeocodeResult, GeoPoint


class GoogleGeocoder:
    """
    Geocodes addresses and reverse geocodes coordinates.

    An instance owns its configuration; it holds no per-request state, so
    one instance can serve concurrent callers.
    """

    def __init__(self,
                 config: Optional[GeocoderConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the geocoder.

        Args:
            config: Client configuration (built from the environment if not provided)
            session: HTTP session to send requests with (a new one if not provided)
        """
        self.config = config or GeocoderConfig.from_env()

        if session is None:
            session = requests.Session()
            session.headers.update({
                'User-Agent': self.config.user_agent
            })
        self._session = session

        log_info(
            f"GoogleGeocoder initialized "
            f"(url={self.config.base_url}, auth={self.config.auth.name})"
        )

    def build_request_query(self, params: str) -> str:
        """
        Build the final query for operation parameters.

        Prefixes ``sensor=false`` and applies the configured auth scheme.

        Raises:
            InvalidPrivateKeyError: If the signing key is not base64url
            SigningError: If the URL to sign cannot be parsed
        """
        return self.config.auth.finish_query(with_sensor(params), self.config.base_url)

    def request(self, query: str) -> bytes:
        """
        Send ``GET <base_url>?<query>`` and return the raw body.

        The query is sent exactly as given; credentials are the caller's
        responsibility here. The HTTP status is not inspected: any body
        is returned, a non-2xx status is only logged.

        Raises:
            TransportError: On connection failures and timeouts
        """
        url = f"{self.config.base_url}?{query}"

        try:
            response = self._session.get(url, timeout=self.config.request_timeout)
        except requests.exceptions.Timeout as e:
            log_error(f"Timeout requesting {self.config.base_url}")
            raise TransportError(f"Request timeout: {e}") from e
        except requests.exceptions.RequestException as e:
            log_error(f"Request error for {self.config.base_url}: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            log_warning(
                f"HTTP {response.status_code} from {self.config.base_url}, "
                f"parsing body anyway"
            )

        return response.content

    def geocode(self, address: str) -> GeocodeResult:
        """
        Geocode an address.

        Args:
            address: Free-form address

        Returns:
            GeocodeResult of the first match; unpacks as ``point, formatted_address``

        Raises:
            ZeroResultsError: If nothing matches
            GeocodingError: On configuration, signing, transport or decode failures
        """
        log_info(f"Geocoding address: {address}")

        try:
            query = self.build_request_query(build_geocode_query(address))
            result = parse_geocode_response(self.request(query))
        except ZeroResultsError:
            log_info(f"No results for address: {address}")
            raise
        except GeocodingError as e:
            log_error(f"Failed to geocode '{address}': {e}")
            raise

        log_info(
            f"Geocoded '{address}' to ({result.point.lat}, {result.point.lng})"
        )
        return result

    def reverse_geocode(self, point: GeoPoint) -> str:
        """
        Reverse geocode a point to the formatted address of the first match.

        Raises:
            ZeroResultsError: If nothing matches
            GeocodingError: On configuration, signing, transport or decode failures
        """
        log_info(f"Reverse geocoding ({point.lat}, {point.lng})")

        try:
            query = self.build_request_query(build_reverse_geocode_query(point))
            address = parse_reverse_geocode_response(self.request(query))
        except ZeroResultsError:
            log_info(f"No results for ({point.lat}, {point.lng})")
            raise
        except GeocodingError as e:
            log_error(f"Failed to reverse geocode ({point.lat}, {point.lng}): {e}")
            raise

        log_info(f"Reverse geocoded ({point.lat}, {point.lng}) to '{address}'")
        return address
