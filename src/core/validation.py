"""Validation utilities for DIGIPIN operations.

Every predicate is pure and never raises on bad input: it returns a
`ValidationResult` with a flag, an optional error (plus its `ErrorKind`) and
an optional non-blocking warning.
"""

from __future__ import annotations

from typing import Sequence

from core.domain import errors
from core.domain.constants import LOW_PRECISION_THRESHOLD, MAX_GRID_RADIUS, MAX_SEARCH_RADIUS_METERS
from core.domain.errors import ErrorKind
from core.domain.grid import DEFAULT_GRID_SPEC, GridSpec
from core.domain.models import Coordinate, ValidationResult
from core.domain.results import Failure, failure


def validate_code(code: str, grid: GridSpec = DEFAULT_GRID_SPEC) -> ValidationResult:
    """Validates DIGIPIN code format (blank, length, alphabet)."""

    if not code or not code.strip():
        return ValidationResult.invalid(ErrorKind.INVALID_FORMAT, errors.EMPTY_CODE)

    if len(code) != grid.precision:
        return ValidationResult.invalid(
            ErrorKind.INVALID_LENGTH,
            f"{errors.INVALID_CODE_LENGTH.format(length=grid.precision)}, got {len(code)}",
        )

    if not grid.alphabet.pattern(grid.precision).fullmatch(code):
        offending = sorted({ch for ch in code if ch not in grid.alphabet})
        return ValidationResult.invalid(
            ErrorKind.INVALID_CHARACTER,
            f"{errors.INVALID_CODE_CHARACTERS}: {', '.join(offending)}",
        )

    return ValidationResult.valid()


def validate_coordinates(latitude: float, longitude: float) -> ValidationResult:
    if not (-90.0 <= latitude <= 90.0):
        return ValidationResult.invalid(
            ErrorKind.INVALID_LATITUDE,
            f"{errors.INVALID_LATITUDE}, got {latitude}",
        )
    if not (-180.0 <= longitude <= 180.0):
        return ValidationResult.invalid(
            ErrorKind.INVALID_LONGITUDE,
            f"{errors.INVALID_LONGITUDE}, got {longitude}",
        )
    return ValidationResult.valid()


def validate_domain_bounds(coordinate: Coordinate, grid: GridSpec = DEFAULT_GRID_SPEC) -> ValidationResult:
    """Range check + domain containment; warns inside the boundary buffer."""

    coordinate_check = validate_coordinates(coordinate.latitude, coordinate.longitude)
    if not coordinate_check.is_valid:
        return coordinate_check

    bounds = grid.bounds
    if not bounds.contains(coordinate):
        return ValidationResult.invalid(
            ErrorKind.OUT_OF_BOUNDS,
            f"{errors.COORDINATE_OUT_OF_BOUNDS}: {coordinate}",
        )

    buffer = grid.boundary_buffer
    if (
        coordinate.latitude > bounds.northeast.latitude - buffer
        or coordinate.latitude < bounds.southwest.latitude + buffer
        or coordinate.longitude > bounds.northeast.longitude - buffer
        or coordinate.longitude < bounds.southwest.longitude + buffer
    ):
        return ValidationResult.valid(
            "Coordinate is near the grid domain boundary, some nearby DIGIPIN codes might be unavailable"
        )

    return ValidationResult.valid()


def validate_neighbor_radius(radius: int, *, max_grid_radius: int = MAX_GRID_RADIUS) -> ValidationResult:
    if radius <= 0:
        return ValidationResult.invalid(
            ErrorKind.NEGATIVE_RADIUS,
            f"{errors.NEGATIVE_RADIUS}, got {radius}",
        )

    if radius > max_grid_radius:
        return ValidationResult.valid(
            f"Radius will be limited to maximum {max_grid_radius} grid cells for performance reasons"
        )

    return ValidationResult.valid()


def validate_distance_radius(
    radius_meters: float,
    *,
    min_cell_meters: float,
    max_meters: float = MAX_SEARCH_RADIUS_METERS,
) -> ValidationResult:
    # `not (x > 0)` rechaza también NaN.
    if not (radius_meters > 0.0):
        return ValidationResult.invalid(
            ErrorKind.NEGATIVE_RADIUS,
            f"{errors.NEGATIVE_RADIUS} in meters, got {radius_meters}",
        )

    if radius_meters > max_meters:
        return ValidationResult.valid(
            "Very large radius may result in incomplete results due to grid cell limits"
        )

    if radius_meters < min_cell_meters:
        return ValidationResult.valid(
            f"Radius smaller than grid size ({min_cell_meters:.1f}m) may not find any results"
        )

    return ValidationResult.valid()


def validate_precision_level(level: int, grid: GridSpec = DEFAULT_GRID_SPEC) -> ValidationResult:
    if level < 1 or level > grid.precision:
        return ValidationResult.invalid(
            ErrorKind.INVALID_PRECISION,
            f"Precision must be between 1 and {grid.precision}, got {level}",
        )

    if level < LOW_PRECISION_THRESHOLD:
        return ValidationResult.valid("Low precision level will result in large grid areas")

    return ValidationResult.valid()


def validate_coordinate_list(coordinates: Sequence[tuple[float, float]]) -> ValidationResult:
    """Validates (latitude, longitude) pairs, reporting the first bad index."""

    if not coordinates:
        return ValidationResult.invalid(ErrorKind.EMPTY_INPUT, errors.EMPTY_COORDINATE_LIST)

    for index, (latitude, longitude) in enumerate(coordinates):
        check = validate_coordinates(latitude, longitude)
        if not check.is_valid:
            return ValidationResult.invalid(
                check.error_kind or ErrorKind.INVALID_FORMAT,
                f"Invalid coordinate at index {index}: {check.error_message}",
            )

    return ValidationResult.valid()


def as_failure(validation: ValidationResult) -> Failure:
    """Traduce una validación fallida al `Failure` tipado equivalente."""

    return failure(
        validation.error_kind or ErrorKind.INVALID_FORMAT,
        validation.error_message or "Validation failed",
    )
