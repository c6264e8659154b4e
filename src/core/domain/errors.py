"""Tipos de error del codec.

Por qué un enum + modelo:
- Todas las operaciones públicas devuelven `{kind, message}` en vez de lanzar.
- `DigipinError` existe solo para quien prefiera excepciones (`Failure.unwrap`).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Categorías de error expuestas en el borde público."""

    INVALID_LATITUDE = "INVALID_LATITUDE"
    INVALID_LONGITUDE = "INVALID_LONGITUDE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_BOUNDS = "INVALID_BOUNDS"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NEGATIVE_RADIUS = "NEGATIVE_RADIUS"
    INVALID_PRECISION = "INVALID_PRECISION"
    EMPTY_INPUT = "EMPTY_INPUT"

    # Fallos inesperados capturados en los puntos de entrada.
    GENERATION_FAILED = "GENERATION_FAILED"
    DECODE_FAILED = "DECODE_FAILED"
    NEIGHBORS_FAILED = "NEIGHBORS_FAILED"
    RADIUS_SEARCH_FAILED = "RADIUS_SEARCH_FAILED"
    URL_CREATION_FAILED = "URL_CREATION_FAILED"
    PRECISION_FAILED = "PRECISION_FAILED"
    AREA_CALCULATION_FAILED = "AREA_CALCULATION_FAILED"
    DISTANCE_CALCULATION_FAILED = "DISTANCE_CALCULATION_FAILED"


INVALID_CODE_LENGTH = "DIGIPIN code must be exactly {length} characters"
INVALID_CODE_CHARACTERS = "DIGIPIN code contains invalid characters"
EMPTY_CODE = "DIGIPIN code cannot be empty"
INVALID_LATITUDE = "Latitude must be between -90 and 90"
INVALID_LONGITUDE = "Longitude must be between -180 and 180"
COORDINATE_OUT_OF_BOUNDS = "Coordinate is outside the grid domain"
NEGATIVE_RADIUS = "Radius must be positive"
EMPTY_COORDINATE_LIST = "Coordinate list cannot be empty"


class CodecError(BaseModel):
    """Par `{kind, message}` devuelto por cualquier operación fallida."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field(..., description="Categoría estable del error.")
    message: str = Field(..., min_length=1, description="Detalle legible para humanos.")

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class DigipinError(Exception):
    """Raised by `Failure.unwrap()`; carries the original `CodecError`."""

    def __init__(self, error: CodecError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
