"""
Service-area geometry.

Great-circle distance from a customer's coordinates to the nearest home
base. The estimators only ever see the resulting miles.

Coordinates are (lng, lat), matching the geocoder's output.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_MILES = 3958.8


@dataclass(frozen=True)
class HomeBase:
    zip: str
    name: str
    coordinates: tuple  # (lng, lat)


HOME_BASES = (
    HomeBase("54481", "Schofield", (-89.6065, 44.9058)),
    HomeBase("54482", "Rothschild", (-89.6279, 44.8853)),
    HomeBase("54492", "Weston", (-89.5465, 44.8908)),
)


@dataclass(frozen=True)
class NearestBase:
    distance: float
    base_index: int
    base_name: str


def great_circle_miles(a: tuple, b: tuple) -> float:
    """Haversine distance in miles between two (lng, lat) points."""
    lat1 = math.radians(a[1])
    lat2 = math.radians(b[1])
    d_lat = lat2 - lat1
    d_lon = math.radians(b[0] - a[0])

    h = (math.sin(d_lat / 2) ** 2
         + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def nearest_home_base(coordinates: tuple, bases: tuple = HOME_BASES) -> NearestBase:
    """Closest base and its distance, rounded to 0.1 mile."""
    distances = [great_circle_miles(coordinates, b.coordinates) for b in bases]
    idx = min(range(len(bases)), key=distances.__getitem__)
    return NearestBase(
        distance=math.floor(distances[idx] * 10 + 0.5) / 10,
        base_index=idx,
        base_name=bases[idx].name,
    )
