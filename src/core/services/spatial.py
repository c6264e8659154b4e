"""Consultas espaciales sobre la rejilla: vecinos y búsqueda por radio.

Nota sobre la aproximación:
- Los vecinos se calculan desplazando el centro de la celda un múltiplo de su
  alto/ancho en grados. No se corrige la compresión de la longitud con la
  latitud, así que cerca de bandas de ancho distinto el conjunto puede incluir
  o excluir vecinos geométricos reales. Cambiarlo alteraría los códigos
  devueltos para las mismas entradas.
"""

from __future__ import annotations

import logging
import math

from core.domain.constants import MAX_GRID_RADIUS, MAX_SEARCH_RADIUS_METERS
from core.domain.errors import ErrorKind
from core.domain.models import BoundingBox, Coordinate, DigipinCode
from core.domain.results import Result, Success, failure, guarded
from core.geo import cell_size_meters, distance_meters, finest_cell_meters
from core.interfaces.codec import CellCodec
from core.validation import as_failure, validate_distance_radius, validate_neighbor_radius

logger = logging.getLogger(__name__)


class SpatialQueryEngine:
    """Enumeración de vecinos y búsqueda por distancia sobre un `CellCodec`.

    Trabajo acotado: como mucho `(2*max_grid_radius + 1)**2 - 1` candidatos por
    llamada (40,400 con el límite por defecto de 100 celdas).
    """

    def __init__(
        self,
        codec: CellCodec,
        *,
        max_grid_radius: int = MAX_GRID_RADIUS,
        max_search_radius_meters: float = MAX_SEARCH_RADIUS_METERS,
    ) -> None:
        self._codec = codec
        self._max_grid_radius = max_grid_radius
        self._max_search_radius_meters = max_search_radius_meters
        self._min_cell_meters = finest_cell_meters(codec.grid)

    @property
    def max_grid_radius(self) -> int:
        return self._max_grid_radius

    @guarded(ErrorKind.NEIGHBORS_FAILED, "get neighbors")
    def neighbors(self, code: str, radius: int = 1) -> Result[list[DigipinCode]]:
        validation = validate_neighbor_radius(radius, max_grid_radius=self._max_grid_radius)
        if not validation.is_valid:
            return as_failure(validation)

        decoded = self._codec.decode(code)
        if not decoded.ok:
            return decoded

        center, box = decoded.value
        effective = min(radius, self._max_grid_radius)
        cells = self._enumerate(code, center, box, effective)
        return Success(cells, warning=validation.warning_message)

    @guarded(ErrorKind.RADIUS_SEARCH_FAILED, "find DIGIPIN codes in radius")
    def within_radius(self, center: Coordinate, radius_meters: float) -> Result[list[DigipinCode]]:
        validation = validate_distance_radius(
            radius_meters,
            min_cell_meters=self._min_cell_meters,
            max_meters=self._max_search_radius_meters,
        )
        if not validation.is_valid:
            return as_failure(validation)
        warning = validation.warning_message

        if not self._codec.grid.bounds.contains(center):
            return failure(ErrorKind.OUT_OF_BOUNDS, "Center coordinate is outside the grid domain")

        encoded = self._codec.encode(center)
        if not encoded.ok:
            return encoded
        center_cell = encoded.value
        # Aviso de borde del dominio cuando el radio no generó otro.
        warning = warning or encoded.warning

        cell_meters = cell_size_meters(center_cell.bounding_box)
        ratio = radius_meters / cell_meters
        if ratio > self._max_grid_radius:
            grid_radius = self._max_grid_radius
            warning = f"Search radius limited to {grid_radius * cell_meters:.0f}m for performance"
            logger.debug("Grid radius %.1f clamped to %d cells", ratio, grid_radius)
        else:
            grid_radius = math.ceil(ratio)

        candidates = self._enumerate(
            center_cell.code,
            center_cell.center,
            center_cell.bounding_box,
            grid_radius,
        )
        candidates.append(center_cell)

        matches = [cell for cell in candidates if distance_meters(center, cell.center) <= radius_meters]
        return Success(matches, warning=warning)

    def _enumerate(
        self,
        center_code: str,
        center: Coordinate,
        box: BoundingBox,
        radius: int,
    ) -> list[DigipinCode]:
        span_lat = box.height
        span_lon = box.width
        domain = self._codec.grid.bounds

        seen = {center_code}
        cells: list[DigipinCode] = []
        for d_lat in range(-radius, radius + 1):
            for d_lon in range(-radius, radius + 1):
                if d_lat == 0 and d_lon == 0:
                    continue

                candidate = Coordinate.create(
                    center.latitude + d_lat * span_lat,
                    center.longitude + d_lon * span_lon,
                )
                if not candidate.ok or not domain.contains(candidate.value):
                    continue

                encoded = self._codec.encode(candidate.value)
                if not encoded.ok:
                    logger.debug("Skipping neighbor at offset (%d, %d): %s", d_lat, d_lon, encoded.message)
                    continue

                cell = encoded.value
                if cell.code in seen:
                    continue
                seen.add(cell.code)
                cells.append(cell)

        return cells
