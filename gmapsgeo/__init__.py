"""
gmapsgeo: client for the Google Maps Geocoding API.

Forward and reverse geocoding with unauthenticated, API-key or
signed-URL (client ID + HMAC-SHA1) requests.
"""

from .geocoding import (
    AuthScheme,
    ConfigurationError,
    GeocodeResult,
    GeocoderConfig,
    GeocodingError,
    GeoPoint,
    GoogleGeocoder,
    InvalidPrivateKeyError,
    ResponseDecodeError,
    SignedAuth,
    SigningError,
    TokenAuth,
    TransportError,
    Unauthenticated,
    ZeroResultsError,
)

__all__ = [
    "GoogleGeocoder",
    "GeocoderConfig",
    "GeoPoint",
    "GeocodeResult",
    "AuthScheme",
    "Unauthenticated",
    "TokenAuth",
    "SignedAuth",
    "GeocodingError",
    "ConfigurationError",
    "InvalidPrivateKeyError",
    "SigningError",
    "TransportError",
    "ResponseDecodeError",
    "ZeroResultsError",
]

# Version info
__version__ = "1.0.0"
