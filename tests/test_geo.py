"""Tests for core.geo."""

import pytest

from core.domain.grid import DEFAULT_GRID_SPEC
from core.domain.models import BoundingBox, Coordinate
from core.geo import (
    area_square_meters,
    cell_dimensions_meters,
    cell_size_meters,
    describe_precision,
    distance_meters,
    finest_cell_meters,
    map_link,
)

DELHI = Coordinate(latitude=28.6139, longitude=77.2090)
MUMBAI = Coordinate(latitude=19.0760, longitude=72.8777)


class TestDistance:
    """Tests for distance_meters."""

    def test_same_point(self):
        assert distance_meters(DELHI, DELHI) == 0.0

    def test_symmetric(self):
        assert distance_meters(DELHI, MUMBAI) == pytest.approx(distance_meters(MUMBAI, DELHI))

    def test_delhi_mumbai(self):
        """Roughly 1,150 km great-circle."""
        assert 1_100_000 < distance_meters(DELHI, MUMBAI) < 1_200_000

    def test_one_degree_latitude(self):
        a = Coordinate(latitude=0.0, longitude=0.0)
        b = Coordinate(latitude=1.0, longitude=0.0)
        assert distance_meters(a, b) == pytest.approx(111_194.9, abs=1.0)


class TestCellSize:
    """Tests for cell dimension helpers."""

    def test_finest_cell(self):
        assert finest_cell_meters(DEFAULT_GRID_SPEC) == pytest.approx(3.82, abs=0.01)

    def test_dimensions_shrink_east_west_with_latitude(self):
        box = BoundingBox(
            southwest=Coordinate(latitude=60.0, longitude=10.0),
            northeast=Coordinate(latitude=61.0, longitude=11.0),
        )
        north_south, east_west = cell_dimensions_meters(box)
        assert east_west < north_south
        assert cell_size_meters(box) == pytest.approx((north_south + east_west) / 2)

    def test_area(self):
        box = BoundingBox(
            southwest=Coordinate(latitude=0.0, longitude=0.0),
            northeast=Coordinate(latitude=0.001, longitude=0.001),
        )
        assert area_square_meters(box) == pytest.approx(111.19**2, rel=0.01)


class TestDescribePrecision:
    """Tests for describe_precision."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (3.6, "Building level precision (~3.6m)"),
            (20.0, "Street level precision (~20m)"),
            (120.0, "Neighborhood level precision (~120m)"),
            (1500.0, "District level precision (~1.5km)"),
            (20000.0, "Regional level precision (~20km)"),
        ],
    )
    def test_bands(self, size, expected):
        assert describe_precision(size) == expected


class TestMapLink:
    """Tests for map_link."""

    def test_default_base(self):
        assert map_link(DELHI) == "https://www.google.com/maps?q=28.6139,77.209"

    def test_custom_base_trailing_slash(self):
        assert map_link(DELHI, "https://maps.example.org/") == "https://maps.example.org?q=28.6139,77.209"
