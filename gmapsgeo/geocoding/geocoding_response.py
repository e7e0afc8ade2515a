"""
Interpretation of geocoding service responses.

Turns raw JSON bodies into results. An empty result list is reported as
ZeroResultsError; anything that is not a usable JSON document is a
ResponseDecodeError on both the forward and the reverse path.
"""

import json
from typing import Any, Dict, List

from .geocoding_errors import ResponseDecodeError, ZeroResultsError
from .geocoding_types import GeocodeResult, GeoPoint


def _decode(data: bytes) -> Dict[str, Any]:
    try:
        document = json.loads(data)
    except (ValueError, TypeError) as e:
        raise ResponseDecodeError(f"Invalid JSON in geocoding response: {e}") from e

    if not isinstance(document, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object, got {type(document).__name__}"
        )
    return document


def _first_result(document: Dict[str, Any]) -> Dict[str, Any]:
    results: List[Any] = document.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise ResponseDecodeError("'results' is not a list")

    if not results:
        status = document.get("status")
        message = document.get("error_message")
        if status and status != "ZERO_RESULTS":
            detail = f"ZERO_RESULTS (status={status}"
            detail += f", {message})" if message else ")"
            raise ZeroResultsError(detail)
        raise ZeroResultsError()

    first = results[0]
    if not isinstance(first, dict):
        raise ResponseDecodeError("Result entry is not an object")
    return first


def _formatted_address(result: Dict[str, Any]) -> str:
    address = result.get("formatted_address")
    if not isinstance(address, str):
        raise ResponseDecodeError("Result has no formatted_address")
    return address


def _coordinate(location: Dict[str, Any], name: str) -> float:
    # Key match is case-insensitive: fixtures use Lat/Lng, the live API lat/lng
    for key, value in location.items():
        if key.lower() == name:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ResponseDecodeError(f"Location {name} is not a number")
            return float(value)
    raise ResponseDecodeError(f"Location has no {name}")


def parse_geocode_response(data: bytes) -> GeocodeResult:
    """
    Interpret a forward geocode response.

    Args:
        data: Raw response body

    Returns:
        GeocodeResult for the first result

    Raises:
        ResponseDecodeError: On malformed JSON or a result missing fields
        ZeroResultsError: If the response has no results
    """
    result = _first_result(_decode(data))

    geometry = result.get("geometry")
    location = geometry.get("location") if isinstance(geometry, dict) else None
    if not isinstance(location, dict):
        raise ResponseDecodeError("Result has no geometry.location")

    point = GeoPoint(lat=_coordinate(location, "lat"), lng=_coordinate(location, "lng"))
    return GeocodeResult(formatted_address=_formatted_address(result), point=point)


def parse_reverse_geocode_response(data: bytes) -> str:
    """
    Interpret a reverse geocode response.

    Returns:
        Formatted address of the first result

    Raises:
        ResponseDecodeError: On malformed JSON or a result missing fields
        ZeroResultsError: If the response has no results
    """
    return _formatted_address(_first_result(_decode(data)))
