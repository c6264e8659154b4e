"""Geographic utility functions.

Distances are great-circle (haversine) on a spherical Earth of radius
6,371,000 m. Cell size and area use the same two spans: north-south at the
cell's central longitude and east-west at its central latitude.
"""

from __future__ import annotations

import math
from urllib.parse import urlencode

from core.domain.constants import DEFAULT_MAPS_BASE_URL, EARTH_RADIUS_METERS
from core.domain.grid import GridSpec
from core.domain.models import BoundingBox, Coordinate


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates, in meters."""

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(delta_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def cell_dimensions_meters(box: BoundingBox) -> tuple[float, float]:
    """Return (north-south, east-west) spans of `box` in meters."""

    center = box.center
    north_south = distance_meters(
        Coordinate(latitude=box.southwest.latitude, longitude=center.longitude),
        Coordinate(latitude=box.northeast.latitude, longitude=center.longitude),
    )
    east_west = distance_meters(
        Coordinate(latitude=center.latitude, longitude=box.southwest.longitude),
        Coordinate(latitude=center.latitude, longitude=box.northeast.longitude),
    )
    return north_south, east_west


def cell_size_meters(box: BoundingBox) -> float:
    north_south, east_west = cell_dimensions_meters(box)
    return (north_south + east_west) / 2


def area_square_meters(box: BoundingBox) -> float:
    # Planar approximation; spherical excess is negligible at cell scale.
    north_south, east_west = cell_dimensions_meters(box)
    return north_south * east_west


def describe_precision(size_meters: float) -> str:
    if size_meters < 5:
        return f"Building level precision (~{size_meters:.1f}m)"
    if size_meters < 50:
        return f"Street level precision (~{size_meters:.0f}m)"
    if size_meters < 500:
        return f"Neighborhood level precision (~{size_meters:.0f}m)"
    if size_meters < 5000:
        return f"District level precision (~{size_meters / 1000:.1f}km)"
    return f"Regional level precision (~{size_meters / 1000:.0f}km)"


def map_link(coordinate: Coordinate, base_url: str = DEFAULT_MAPS_BASE_URL) -> str:
    """URL de mapa con el punto como parámetro `q` (solo formateo, sin red)."""

    query = urlencode({"q": f"{coordinate.latitude},{coordinate.longitude}"}, safe=",")
    return f"{base_url.rstrip('/')}?{query}"


def finest_cell_meters(grid: GridSpec) -> float:
    """North-south size of one cell at full precision."""

    span = grid.bounds.height / grid.size**grid.precision
    return EARTH_RADIUS_METERS * math.radians(span)
