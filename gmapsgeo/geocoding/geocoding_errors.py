"""
Custom exceptions for the geocoding module.

Every failure a caller can see is a GeocodingError subclass, so callers can
tell "no match" (ZeroResultsError) apart from "request failed".
"""


class GeocodingError(Exception):
    """Base exception for the geocoding module."""
    pass


class ConfigurationError(GeocodingError):
    """Raised when the client configuration is invalid or incomplete."""
    pass


class InvalidPrivateKeyError(ConfigurationError):
    """Raised when the signing private key is not valid base64url."""
    pass


class SigningError(GeocodingError):
    """Raised when the URL to be signed cannot be parsed."""
    pass


class TransportError(GeocodingError):
    """Raised when the HTTP request to the geocoding service fails."""
    pass


class ResponseDecodeError(GeocodingError):
    """Raised when the response body is not the expected JSON document."""
    pass


class ZeroResultsError(GeocodingError):
    """Raised when the geocoding service returns no results."""

    def __init__(self, message: str = "ZERO_RESULTS"):
        super().__init__(message)
