"""
Geocoding module for gmapsgeo.

This module provides functionality for:
- Forward geocoding addresses to coordinates
- Reverse geocoding coordinates to addresses
- Authenticating requests with no credentials, an API key, or a signed URL

Main classes:
- GoogleGeocoder: Client for the Google Maps Geocoding API
- GeocoderConfig: Immutable client configuration
- AuthScheme: Abstract base for authentication schemes
- Unauthenticated, TokenAuth, SignedAuth: Authentication schemes

Errors:
- GeocodingError: Base exception for the geocoding module
- ZeroResultsError: The service returned no results
- ConfigurationError, InvalidPrivateKeyError: Invalid client configuration
- SigningError, TransportError, ResponseDecodeError: Request failures
"""

from .geocoding_auth import AuthScheme, SignedAuth, TokenAuth, Unauthenticated
from .geocoding_client import GoogleGeocoder
from .geocoding_config import DEFAULT_GEOCODE_URL, GeocoderConfig
from .geocoding_errors import (
    ConfigurationError,
    GeocodingError,
    InvalidPrivateKeyError,
    ResponseDecodeError,
    SigningError,
    TransportError,
    ZeroResultsError,
)
from .geocoding_signer import sign_url
from .geocoding_types import GeocodeResult, GeoPoint

__all__ = [
    # Main classes
    "GoogleGeocoder",
    "GeocoderConfig",
    "DEFAULT_GEOCODE_URL",

    # Types
    "GeoPoint",
    "GeocodeResult",

    # Authentication
    "AuthScheme",
    "Unauthenticated",
    "TokenAuth",
    "SignedAuth",
    "sign_url",

    # Errors
    "GeocodingError",
    "ConfigurationError",
    "InvalidPrivateKeyError",
    "SigningError",
    "TransportError",
    "ResponseDecodeError",
    "ZeroResultsError",
]
