"""
Configuration for the geocoding client.

A GeocoderConfig is an immutable value owned by a client instance. Changing
a setting means building a new config with one of the ``with_*`` methods.
"""

import math
from dataclasses import dataclass, field, replace
from urllib.parse import urlsplit

from ..config.config_module import ConfigError, get_config, validate_config
from .geocoding_auth import AuthScheme, SignedAuth, TokenAuth, Unauthenticated
from .geocoding_errors import ConfigurationError

DEFAULT_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "gmapsgeo/1.0"

AUTH_SCHEMES = ("none", "token", "signed")


@dataclass(frozen=True)
class GeocoderConfig:
    """Settings for a GoogleGeocoder instance."""

    # Endpoint queried with GET <base_url>?<query>
    base_url: str = DEFAULT_GEOCODE_URL

    # Authentication scheme applied to every request
    auth: AuthScheme = field(default_factory=Unauthenticated)

    # Timeout in seconds handed to the HTTP session
    request_timeout: float = DEFAULT_TIMEOUT

    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        """Validate configuration values."""
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty")

        try:
            parts = urlsplit(self.base_url)
        except ValueError as e:
            raise ConfigurationError(f"Invalid base_url: {self.base_url}: {e}") from e

        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"Invalid base_url: {self.base_url}. "
                f"Must be an absolute http(s) URL"
            )

        if parts.query:
            raise ConfigurationError("base_url must not contain a query string")

        if not isinstance(self.auth, AuthScheme):
            raise ConfigurationError(
                f"auth must be an AuthScheme, got {type(self.auth).__name__}"
            )

        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be a positive finite number, got {self.request_timeout}"
            )

    def with_base_url(self, base_url: str) -> "GeocoderConfig":
        """Return a copy pointing at a different endpoint."""
        return replace(self, base_url=base_url)

    def with_auth(self, auth: AuthScheme) -> "GeocoderConfig":
        """Return a copy using a different authentication scheme."""
        return replace(self, auth=auth)

    def with_timeout(self, request_timeout: float) -> "GeocoderConfig":
        """Return a copy with a different request timeout."""
        return replace(self, request_timeout=request_timeout)

    @classmethod
    def from_env(cls) -> "GeocoderConfig":
        """
        Build a config from environment variables.

        Variables:
            GOOGLE_GEOCODE_URL: endpoint (default: Google geocode JSON API)
            GOOGLE_GEOCODER_AUTH: ``none``, ``token`` or ``signed`` (default: none)
            GOOGLE_MAPS_API_KEY: key for ``token``
            GOOGLE_MAPS_CLIENT_ID, GOOGLE_MAPS_PRIVATE_KEY: for ``signed``
            GOOGLE_MAPS_CHANNEL: optional channel for ``signed``
            GOOGLE_GEOCODER_TIMEOUT: request timeout in seconds

        Raises:
            ConfigurationError: If the scheme is unknown, its credentials are
                missing, or a value is malformed
        """
        scheme = get_config("GOOGLE_GEOCODER_AUTH", "none").strip().lower() or "none"
        if scheme not in AUTH_SCHEMES:
            raise ConfigurationError(
                f"Invalid GOOGLE_GEOCODER_AUTH: {scheme}. "
                f"Must be one of {', '.join(AUTH_SCHEMES)}"
            )

        try:
            if scheme == "token":
                credentials = validate_config(["GOOGLE_MAPS_API_KEY"])
                auth = TokenAuth(api_key=credentials["GOOGLE_MAPS_API_KEY"])
            elif scheme == "signed":
                credentials = validate_config(["GOOGLE_MAPS_CLIENT_ID", "GOOGLE_MAPS_PRIVATE_KEY"])
                auth = SignedAuth(
                    client_id=credentials["GOOGLE_MAPS_CLIENT_ID"],
                    private_key=credentials["GOOGLE_MAPS_PRIVATE_KEY"],
                    channel=get_config("GOOGLE_MAPS_CHANNEL", ""),
                )
            else:
                auth = Unauthenticated()
        except ConfigError as e:
            raise ConfigurationError(str(e)) from e

        timeout_value = get_config("GOOGLE_GEOCODER_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            request_timeout = float(timeout_value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid GOOGLE_GEOCODER_TIMEOUT: {timeout_value}"
            ) from e

        return cls(
            base_url=get_config("GOOGLE_GEOCODE_URL", DEFAULT_GEOCODE_URL),
            auth=auth,
            request_timeout=request_timeout,
        )
