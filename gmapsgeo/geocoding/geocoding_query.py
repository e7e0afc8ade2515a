"""
Query string construction for geocoding requests.

Builds the scheme-agnostic part of the query; credentials are appended
later by the configured AuthScheme.
"""

from urllib.parse import quote_plus

from .geocoding_types import GeoPoint

# Legacy parameter the upstream API still expects first in every query
SENSOR_PARAM = "sensor=false"


def build_geocode_query(address: str) -> str:
    """Return ``address=<encoded>`` with the address form-encoded."""
    return f"address={quote_plus(address)}"


def build_reverse_geocode_query(point: GeoPoint) -> str:
    """Return ``latlng=<lat>,<lng>`` using the shortest exact float repr."""
    return f"latlng={float(point.lat)!r},{float(point.lng)!r}"


def with_sensor(params: str) -> str:
    """Prefix operation parameters with the fixed sensor parameter."""
    return f"{SENSOR_PARAM}&{params}"
