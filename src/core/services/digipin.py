"""Servicio público DIGIPIN (fachada del Core).

Este módulo agrupa las operaciones que consumen las capas de presentación
(CLI, una futura API...). Cada método devuelve un `Result`: nunca lanza, y los
avisos no bloqueantes viajan en `result.warning` en lugar de quedar como
estado del servicio. Así una misma instancia se puede usar desde varios hilos.

Uso básico:
    service = DigipinService()
    result = service.encode(28.6139, 77.2090)
    if result.ok:
        print(result.value.formatted)
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.config import AppSettings
from core.domain.constants import CODE_SEPARATOR
from core.domain.errors import ErrorKind
from core.domain.grid import GridSpec
from core.domain.models import BoundingBox, Coordinate, DigipinCode
from core.domain.results import Result, Success, guarded
from core.geo import area_square_meters, cell_size_meters, describe_precision, distance_meters, map_link
from core.services.codec import GridCodec
from core.services.spatial import SpatialQueryEngine
from core.validation import as_failure, validate_code, validate_coordinate_list

logger = logging.getLogger(__name__)


def normalize_code(text: str, separator: str = CODE_SEPARATOR) -> str:
    """Quita separadores y espacios y pasa a mayúsculas (`39j-49l-l8t4` -> `39J49LL8T4`)."""

    cleaned = "".join(text.split())
    if separator:
        cleaned = cleaned.replace(separator, "")
    return cleaned.upper()


class DigipinService:
    """Punto de entrada de la librería.

    Por qué una fachada:
    - Construye codec y motor espacial a partir de `AppSettings` en un solo sitio.
    - Convierte fallos inesperados en errores tipados en cada operación.
    """

    def __init__(self, settings: AppSettings | None = None, *, grid: GridSpec | None = None) -> None:
        self._settings = settings or AppSettings()
        self.grid = grid or self._settings.grid_spec()
        self.codec = GridCodec(self.grid)
        self.spatial = SpatialQueryEngine(
            self.codec,
            max_grid_radius=self._settings.max_grid_radius,
            max_search_radius_meters=self._settings.max_search_radius_meters,
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @guarded(ErrorKind.GENERATION_FAILED, "generate DIGIPIN")
    def encode(self, latitude: float, longitude: float) -> Result[DigipinCode]:
        coordinate = Coordinate.create(latitude, longitude)
        if not coordinate.ok:
            return coordinate
        return self.codec.encode(coordinate.value)

    @guarded(ErrorKind.DECODE_FAILED, "generate coordinates")
    def decode(self, code: str) -> Result[DigipinCode]:
        decoded = self.codec.decode(code)
        if not decoded.ok:
            return decoded

        center, box = decoded.value
        return DigipinCode.create(
            code,
            center,
            box,
            symbols=self.grid.alphabet.symbols,
            length=self.grid.precision,
        )

    def format_code(self, cell: DigipinCode) -> str:
        """Formato agrupado con el separador configurado (`39J.49L.L8T4`)."""

        return cell.format(self.grid.separator)

    def is_in_domain(self, coordinate: Coordinate) -> bool:
        return self.grid.bounds.contains(coordinate)

    def is_valid_code(self, code: str) -> bool:
        return validate_code(code, self.grid).is_valid

    def neighbors(self, code: str, radius: int = 1) -> Result[list[DigipinCode]]:
        return self.spatial.neighbors(code, radius)

    def within_radius(self, center: Coordinate, radius_meters: float) -> Result[list[DigipinCode]]:
        return self.spatial.within_radius(center, radius_meters)

    @guarded(ErrorKind.URL_CREATION_FAILED, "create map URL")
    def map_link(self, cell: DigipinCode) -> Result[str]:
        return Success(map_link(cell.center, self._settings.maps_base_url))

    @guarded(ErrorKind.PRECISION_FAILED, "get precision description")
    def precision_description(self, cell: DigipinCode) -> Result[str]:
        return Success(describe_precision(cell_size_meters(cell.bounding_box)))

    @guarded(ErrorKind.AREA_CALCULATION_FAILED, "calculate area")
    def area_square_meters(self, cell: DigipinCode) -> Result[float]:
        return Success(area_square_meters(cell.bounding_box))

    @guarded(ErrorKind.DISTANCE_CALCULATION_FAILED, "calculate distance")
    def distance_meters(self, a: Coordinate, b: Coordinate) -> Result[float]:
        return Success(distance_meters(a, b))

    def region(self, code: str, level: int) -> Result[BoundingBox]:
        return self.codec.region(code, level)

    @guarded(ErrorKind.GENERATION_FAILED, "generate DIGIPIN batch")
    def encode_batch(self, coordinates: Sequence[tuple[float, float]]) -> Result[list[Result[DigipinCode]]]:
        """Codifica una lista de pares (lat, lon).

        La lista entera falla si está vacía o si algún par no es una
        coordenada válida; un punto válido fuera del dominio produce un
        `Failure` en su posición sin abortar el resto.
        """

        validation = validate_coordinate_list(coordinates)
        if not validation.is_valid:
            return as_failure(validation)

        results = [self.encode(latitude, longitude) for latitude, longitude in coordinates]
        failed = sum(1 for result in results if not result.ok)
        if failed:
            logger.info("Batch encode: %d of %d coordinates failed", failed, len(results))
        return Success(results)
