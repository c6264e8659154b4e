"""Tests for core.validation."""

import math

from core.domain.errors import ErrorKind
from core.domain.models import Coordinate
from core.validation import (
    as_failure,
    validate_code,
    validate_coordinate_list,
    validate_coordinates,
    validate_distance_radius,
    validate_domain_bounds,
    validate_neighbor_radius,
    validate_precision_level,
)


class TestValidateCode:
    """Tests for validate_code."""

    def test_valid(self):
        result = validate_code("39J49LL8T4")
        assert result.is_valid
        assert result.warning_message is None

    def test_empty(self):
        assert validate_code("").error_kind is ErrorKind.INVALID_FORMAT
        assert validate_code("   ").error_kind is ErrorKind.INVALID_FORMAT

    def test_length(self):
        result = validate_code("39J49L")
        assert result.error_kind is ErrorKind.INVALID_LENGTH
        assert result.error_message == "DIGIPIN code must be exactly 10 characters, got 6"

    def test_characters(self):
        result = validate_code("ABCDEFGHIJ")
        assert result.error_kind is ErrorKind.INVALID_CHARACTER
        assert "A" in result.error_message

    def test_lower_case_rejected(self):
        assert validate_code("39j49ll8t4").error_kind is ErrorKind.INVALID_CHARACTER

    def test_formatted_code_rejected(self):
        """Separators are not stripped by the validator."""
        assert validate_code("39J-49L-L8T4").error_kind is ErrorKind.INVALID_LENGTH


class TestValidateCoordinates:
    """Tests for coordinate range and domain checks."""

    def test_ranges(self):
        assert validate_coordinates(0.0, 0.0).is_valid
        assert validate_coordinates(-91.0, 0.0).error_kind is ErrorKind.INVALID_LATITUDE
        assert validate_coordinates(0.0, 181.0).error_kind is ErrorKind.INVALID_LONGITUDE
        assert validate_coordinates(0.0, math.nan).error_kind is ErrorKind.INVALID_LONGITUDE

    def test_inside_domain(self):
        result = validate_domain_bounds(Coordinate(latitude=28.6139, longitude=77.2090))
        assert result.is_valid
        assert result.warning_message is None

    def test_outside_domain(self):
        result = validate_domain_bounds(Coordinate(latitude=0.0, longitude=0.0))
        assert result.error_kind is ErrorKind.OUT_OF_BOUNDS

    def test_near_boundary_warns(self):
        result = validate_domain_bounds(Coordinate(latitude=38.45, longitude=77.0))
        assert result.is_valid
        assert "near the grid domain boundary" in result.warning_message

    def test_domain_corner_is_valid(self):
        result = validate_domain_bounds(Coordinate(latitude=2.5, longitude=63.5))
        assert result.is_valid
        assert result.warning_message is not None


class TestValidateRadius:
    """Tests for neighbor and distance radius checks."""

    def test_neighbor_radius_must_be_positive(self):
        assert validate_neighbor_radius(0).error_kind is ErrorKind.NEGATIVE_RADIUS
        assert validate_neighbor_radius(-3).error_kind is ErrorKind.NEGATIVE_RADIUS

    def test_neighbor_radius_over_limit_warns(self):
        result = validate_neighbor_radius(150)
        assert result.is_valid
        assert "maximum 100 grid cells" in result.warning_message

    def test_neighbor_radius_custom_limit(self):
        assert validate_neighbor_radius(5, max_grid_radius=10).warning_message is None

    def test_distance_radius_invalid(self):
        assert validate_distance_radius(0.0, min_cell_meters=3.8).error_kind is ErrorKind.NEGATIVE_RADIUS
        assert validate_distance_radius(math.nan, min_cell_meters=3.8).error_kind is ErrorKind.NEGATIVE_RADIUS

    def test_distance_radius_small_warns(self):
        result = validate_distance_radius(1.0, min_cell_meters=3.8)
        assert result.is_valid
        assert result.warning_message == "Radius smaller than grid size (3.8m) may not find any results"

    def test_distance_radius_large_warns(self):
        result = validate_distance_radius(2_000_000.0, min_cell_meters=3.8)
        assert result.is_valid
        assert "incomplete results" in result.warning_message

    def test_distance_radius_plain(self):
        assert validate_distance_radius(50.0, min_cell_meters=3.8).warning_message is None


class TestValidatePrecisionLevel:
    """Tests for validate_precision_level."""

    def test_out_of_range(self):
        assert validate_precision_level(0).error_kind is ErrorKind.INVALID_PRECISION
        assert validate_precision_level(11).error_kind is ErrorKind.INVALID_PRECISION

    def test_low_level_warns(self):
        assert validate_precision_level(3).warning_message is not None

    def test_high_level_plain(self):
        assert validate_precision_level(8).warning_message is None
        assert validate_precision_level(10).warning_message is None


class TestValidateCoordinateList:
    """Tests for validate_coordinate_list."""

    def test_empty(self):
        assert validate_coordinate_list([]).error_kind is ErrorKind.EMPTY_INPUT

    def test_reports_first_bad_index(self):
        result = validate_coordinate_list([(28.0, 77.0), (95.0, 77.0), (0.0, 200.0)])
        assert result.error_kind is ErrorKind.INVALID_LATITUDE
        assert "index 1" in result.error_message

    def test_valid_list(self):
        assert validate_coordinate_list([(28.0, 77.0), (0.0, 0.0)]).is_valid


class TestAsFailure:
    """Tests for as_failure."""

    def test_keeps_kind_and_message(self):
        result = as_failure(validate_code("39J"))
        assert result.kind is ErrorKind.INVALID_LENGTH
        assert "exactly 10" in result.message
