"""Codec de rejilla: subdivisión recursiva n x n (DIGIPIN usa 4 x 4).

Encoder y decoder comparten el mismo rectángulo de trabajo, inicializado al
dominio de `GridSpec`. El decoder es la inversa algebraica exacta del paso de
estrechamiento del encoder; por eso `encode` decodifica su propia salida para
obtener el centro y la caja canónicos.
"""

from __future__ import annotations

import math

from core.domain.errors import ErrorKind
from core.domain.grid import DEFAULT_GRID_SPEC, GridSpec
from core.domain.models import BoundingBox, Coordinate, DigipinCode
from core.domain.results import Result, Success, failure, guarded
from core.validation import as_failure, validate_code, validate_domain_bounds, validate_precision_level


class GridCodec:
    """Encoder + decoder parametrizados por un `GridSpec`."""

    def __init__(self, grid: GridSpec = DEFAULT_GRID_SPEC) -> None:
        self.grid = grid

    @guarded(ErrorKind.GENERATION_FAILED, "generate DIGIPIN")
    def encode(self, coordinate: Coordinate) -> Result[DigipinCode]:
        validation = validate_domain_bounds(coordinate, self.grid)
        if not validation.is_valid:
            return as_failure(validation)

        code = self._subdivide(coordinate)
        region = self._decode_symbols(code)
        if not region.ok:
            return region

        center, box = region.value
        result = DigipinCode.create(
            code,
            center,
            box,
            symbols=self.grid.alphabet.symbols,
            length=self.grid.precision,
        )
        return result.with_warning(validation.warning_message)

    @guarded(ErrorKind.DECODE_FAILED, "decode DIGIPIN")
    def decode(self, code: str) -> Result[tuple[Coordinate, BoundingBox]]:
        validation = validate_code(code, self.grid)
        if not validation.is_valid:
            return as_failure(validation)
        return self._decode_symbols(code)

    @guarded(ErrorKind.DECODE_FAILED, "decode DIGIPIN region")
    def region(self, code: str, level: int) -> Result[BoundingBox]:
        """Caja de la celda ancestro formada por los primeros `level` símbolos."""

        validation = validate_code(code, self.grid)
        if not validation.is_valid:
            return as_failure(validation)

        level_check = validate_precision_level(level, self.grid)
        if not level_check.is_valid:
            return as_failure(level_check)

        decoded = self._decode_symbols(code[:level])
        if not decoded.ok:
            return decoded
        _, box = decoded.value
        return Success(box, warning=level_check.warning_message)

    def _subdivide(self, coordinate: Coordinate) -> str:
        n = self.grid.size
        last = n - 1
        alphabet = self.grid.alphabet
        bounds = self.grid.bounds

        lat, lon = coordinate.latitude, coordinate.longitude
        lat_min, lat_max = bounds.southwest.latitude, bounds.northeast.latitude
        lon_min, lon_max = bounds.southwest.longitude, bounds.northeast.longitude

        symbols: list[str] = []
        for _ in range(self.grid.precision):
            lat_div = (lat_max - lat_min) / n
            lon_div = (lon_max - lon_min) / n

            # Fila 0 = banda norte. El decoder depende de esta inversión.
            row = last - math.floor((lat - lat_min) / lat_div)
            col = math.floor((lon - lon_min) / lon_div)

            # Clamp for points exactly on the domain edge.
            row = min(max(row, 0), last)
            col = min(max(col, 0), last)

            symbols.append(alphabet.symbol_at(row, col))

            lat_max = lat_min + lat_div * (n - row)
            lat_min = lat_min + lat_div * (last - row)

            lon_min = lon_min + lon_div * col
            lon_max = lon_min + lon_div

        return "".join(symbols)

    def _decode_symbols(self, symbols: str) -> Result[tuple[Coordinate, BoundingBox]]:
        n = self.grid.size
        alphabet = self.grid.alphabet
        bounds = self.grid.bounds

        lat_min, lat_max = bounds.southwest.latitude, bounds.northeast.latitude
        lon_min, lon_max = bounds.southwest.longitude, bounds.northeast.longitude

        for symbol in symbols:
            position = alphabet.position(symbol)
            if position is None:
                return failure(ErrorKind.INVALID_CHARACTER, f"Invalid character in DIGIPIN code: {symbol}")
            row, col = position

            lat_div = (lat_max - lat_min) / n
            lon_div = (lon_max - lon_min) / n

            lat_min, lat_max = lat_max - lat_div * (row + 1), lat_max - lat_div * row
            lon_min, lon_max = lon_min + lon_div * col, lon_min + lon_div * (col + 1)

        center = Coordinate.create((lat_min + lat_max) / 2, (lon_min + lon_max) / 2)
        if not center.ok:
            return center

        box = BoundingBox.create(
            Coordinate(latitude=lat_min, longitude=lon_min),
            Coordinate(latitude=lat_max, longitude=lon_max),
        )
        if not box.ok:
            return box

        return Success((center.value, box.value))
