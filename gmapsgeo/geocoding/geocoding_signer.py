"""
HMAC-SHA1 request signing for the Google Maps signed-request scheme.

The signature covers the request-target of the URL (path plus query,
without scheme and host) exactly as it will be sent. Keys and signatures
use the URL-safe base64 alphabet, so the signature can be appended to the
query without further escaping.
"""

import base64
import binascii
import hashlib
import hmac
import re
from urllib.parse import urlsplit

from .geocoding_errors import InvalidPrivateKeyError, SigningError

_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def canonical_request_target(full_url: str) -> str:
    """
    Reduce a URL to the path-and-query form that gets signed.

    The query is kept verbatim: no re-ordering, no re-encoding.

    Args:
        full_url: Absolute request URL

    Returns:
        Path, followed by ``?`` and the raw query when one is present

    Raises:
        SigningError: If the URL cannot be parsed
    """
    try:
        parts = urlsplit(full_url)
    except ValueError as e:
        raise SigningError(f"Cannot parse URL for signing: {e}") from e

    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"
    return target


def decode_private_key(private_key: str) -> bytes:
    """
    Decode a base64url private key into raw HMAC key bytes.

    Raises:
        InvalidPrivateKeyError: If the key contains characters outside the
            URL-safe alphabet or is incorrectly padded
    """
    if not _BASE64URL_PATTERN.fullmatch(private_key):
        raise InvalidPrivateKeyError("Private key contains invalid base64url characters")
    if len(private_key) % 4:
        raise InvalidPrivateKeyError("Private key is not correctly padded base64url")
    try:
        return base64.urlsafe_b64decode(private_key)
    except binascii.Error as e:
        raise InvalidPrivateKeyError(f"Private key is not valid base64url: {e}") from e


def _hmac_sha1_b64url(key: bytes, payload: str) -> str:
    digest = hmac.new(key, payload.encode("utf-8"), hashlib.sha1).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def sign_payload(payload: str, private_key: str) -> str:
    """Return the base64url HMAC-SHA1 of ``payload`` under ``private_key``."""
    return _hmac_sha1_b64url(decode_private_key(private_key), payload)


def sign_url(full_url: str, private_key: str) -> str:
    """
    Sign a full request URL.

    The key is decoded before the URL is parsed, so a bad key fails first.

    Args:
        full_url: Absolute URL including the query to sign
        private_key: base64url-encoded signing key

    Returns:
        base64url signature, padded (28 characters)

    Raises:
        InvalidPrivateKeyError: If the key is not valid base64url
        SigningError: If the URL cannot be parsed
    """
    key = decode_private_key(private_key)
    return _hmac_sha1_b64url(key, canonical_request_target(full_url))
