"""
Authentication schemes for the geocoding client.

Each scheme finishes a base query (already starting with ``sensor=false``)
into the query string that is actually sent. A client is configured with
exactly one scheme, so key and client/signature parameters never mix.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .geocoding_signer import sign_url


class AuthScheme(ABC):
    """Abstract base class for request authentication schemes."""

    # Short identifier used in configuration and log messages
    name: str = ""

    @abstractmethod
    def finish_query(self, query: str, base_url: str) -> str:
        """
        Append this scheme's parameters to a base query.

        Args:
            query: Base query string, e.g. ``sensor=false&address=Paris``
            base_url: Endpoint the query will be sent to

        Returns:
            Final query string to append after ``?``

        Raises:
            GeocodingError: If the query cannot be finished (signed scheme only)
        """
        pass


@dataclass(frozen=True)
class Unauthenticated(AuthScheme):
    """Sends the query as-is."""

    name = "none"

    def finish_query(self, query: str, base_url: str) -> str:
        return query


@dataclass(frozen=True)
class TokenAuth(AuthScheme):
    """Appends an API key as the ``key`` parameter."""

    api_key: str = field(repr=False)

    name = "token"

    def finish_query(self, query: str, base_url: str) -> str:
        return f"{query}&key={self.api_key}"


@dataclass(frozen=True)
class SignedAuth(AuthScheme):
    """
    Client ID plus HMAC-SHA1 URL signature.

    Appends ``channel`` (only when set) and ``client``, signs the resulting
    URL with the private key and appends the ``signature`` parameter last.
    """

    client_id: str
    private_key: str = field(repr=False)
    channel: str = ""

    name = "signed"

    def finish_query(self, query: str, base_url: str) -> str:
        if self.channel:
            query = f"{query}&channel={self.channel}"
        query = f"{query}&client={self.client_id}"

        signature = sign_url(f"{base_url}?{query}", self.private_key)
        return f"{query}&signature={signature}"
