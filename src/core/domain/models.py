"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en la construcción: nunca existe una coordenada o una
  caja a medio validar.
- `frozen=True` hace que los valores sean inmutables y seguros de compartir.

Nota:
- Estos modelos describen *qué* es una celda, no *cómo* se calcula.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.domain import errors
from core.domain.constants import CODE_SEPARATOR, FORMAT_GROUPS
from core.domain.errors import ErrorKind
from core.domain.results import Result, Success, failure


class Coordinate(BaseModel):
    """Punto geográfico en grados decimales (WGS84)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitud en grados decimales.")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitud en grados decimales.")

    @classmethod
    def create(cls, latitude: float, longitude: float) -> Result[Coordinate]:
        """Factory validada: devuelve `Failure` en lugar de lanzar."""

        # `not (a <= x <= b)` también rechaza NaN.
        if not (-90.0 <= latitude <= 90.0):
            return failure(
                ErrorKind.INVALID_LATITUDE,
                f"{errors.INVALID_LATITUDE}, got {latitude}",
            )
        if not (-180.0 <= longitude <= 180.0):
            return failure(
                ErrorKind.INVALID_LONGITUDE,
                f"{errors.INVALID_LONGITUDE}, got {longitude}",
            )
        return Success(cls(latitude=latitude, longitude=longitude))

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


class BoundingBox(BaseModel):
    """Rectángulo lat/lon definido por sus esquinas suroeste y noreste."""

    model_config = ConfigDict(frozen=True)

    southwest: Coordinate
    northeast: Coordinate

    @model_validator(mode="after")
    def check_corners(self) -> BoundingBox:
        problem = _corner_problem(self.southwest, self.northeast)
        if problem:
            raise ValueError(problem)
        return self

    @classmethod
    def create(cls, southwest: Coordinate, northeast: Coordinate) -> Result[BoundingBox]:
        problem = _corner_problem(southwest, northeast)
        if problem:
            return failure(ErrorKind.INVALID_BOUNDS, problem)
        return Success(cls(southwest=southwest, northeast=northeast))

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            latitude=(self.southwest.latitude + self.northeast.latitude) / 2,
            longitude=(self.southwest.longitude + self.northeast.longitude) / 2,
        )

    @property
    def width(self) -> float:
        return self.northeast.longitude - self.southwest.longitude

    @property
    def height(self) -> float:
        return self.northeast.latitude - self.southwest.latitude

    def contains(self, coordinate: Coordinate) -> bool:
        """Inclusive on all four edges."""

        return (
            self.southwest.latitude <= coordinate.latitude <= self.northeast.latitude
            and self.southwest.longitude <= coordinate.longitude <= self.northeast.longitude
        )

    def __str__(self) -> str:
        return f"BoundingBox(SW={self.southwest}, NE={self.northeast})"


def _corner_problem(southwest: Coordinate, northeast: Coordinate) -> str | None:
    if southwest.latitude > northeast.latitude:
        return "Southwest latitude must be <= northeast latitude"
    if southwest.longitude > northeast.longitude:
        return "Southwest longitude must be <= northeast longitude"
    return None


class DigipinCode(BaseModel):
    """Una celda de la rejilla: código + centro + caja.

    Solo la construye el codec (`encode` produce código y región a la vez;
    `decode` calcula la región y la vuelve a envolver con el código original).
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, description="Símbolos de la celda, sin separadores.")
    center: Coordinate = Field(..., description="Punto medio de la celda.")
    bounding_box: BoundingBox = Field(..., description="Extensión geográfica de la celda.")

    @classmethod
    def create(
        cls,
        code: str,
        center: Coordinate,
        bounding_box: BoundingBox,
        *,
        symbols: str,
        length: int,
    ) -> Result[DigipinCode]:
        if len(code) != length:
            return failure(
                ErrorKind.INVALID_LENGTH,
                f"{errors.INVALID_CODE_LENGTH.format(length=length)}, got {len(code)}",
            )
        invalid = sorted({ch for ch in code if ch not in symbols})
        if invalid:
            return failure(
                ErrorKind.INVALID_CHARACTER,
                f"{errors.INVALID_CODE_CHARACTERS}: {', '.join(invalid)}",
            )
        return Success(cls(code=code, center=center, bounding_box=bounding_box))

    def format(self, separator: str = CODE_SEPARATOR) -> str:
        """Agrupa el código 3-3-4; códigos de otra longitud se devuelven tal cual."""

        if len(self.code) != sum(FORMAT_GROUPS):
            return self.code
        parts: list[str] = []
        start = 0
        for size in FORMAT_GROUPS:
            parts.append(self.code[start : start + size])
            start += size
        return separator.join(parts)

    @property
    def formatted(self) -> str:
        """Con el separador por defecto; para el configurado usa `format(grid.separator)`."""

        return self.format()

    def __str__(self) -> str:
        return f"Digipin(code='{self.code}', center={self.center})"


class ValidationResult(BaseModel):
    """Resultado de un predicado de validación.

    Puede ser válido y aun así llevar un aviso (informativo, nunca bloquea).
    `error_kind` permite traducir el fallo a un `CodecError` tipado.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error_message: str | None = None
    warning_message: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def valid(cls, warning: str | None = None) -> ValidationResult:
        return cls(is_valid=True, warning_message=warning)

    @classmethod
    def invalid(cls, kind: ErrorKind, message: str) -> ValidationResult:
        return cls(is_valid=False, error_message=message, error_kind=kind)
