"""
Value types exchanged by the geocoding client.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """A (latitude, longitude) pair. Coordinates are not range-checked."""

    lat: float
    lng: float


@dataclass(frozen=True)
class GeocodeResult:
    """First match of a forward geocode: formatted address and location."""

    formatted_address: str
    point: GeoPoint

    def __iter__(self):
        """Unpack as ``point, formatted_address``."""
        yield self.point
        yield self.formatted_address
