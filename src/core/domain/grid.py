"""Alfabeto de la rejilla y especificación del codec.

Por qué un `GridSpec` inyectable:
- El algoritmo de subdivisión no conoce ni el dominio ni los símbolos; los
  recibe aquí. Otro dominio u otro alfabeto no tocan la lógica del codec.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from core.domain.constants import (
    BOUNDARY_BUFFER_DEGREES,
    CODE_LENGTH,
    CODE_SEPARATOR,
    DIGIPIN_GRID,
    DOMAIN_MAX_LAT,
    DOMAIN_MAX_LON,
    DOMAIN_MIN_LAT,
    DOMAIN_MIN_LON,
)
from core.domain.models import BoundingBox, Coordinate


class GridAlphabet(BaseModel):
    """Tabla cuadrada de símbolos, aplanada fila a fila (`index = row*size + col`).

    La fila 0 es la banda más al norte; la columna 0 la más al oeste.
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[str, ...], ...] = Field(..., description="Símbolos por fila (norte -> sur).")

    _positions: dict[str, tuple[int, int]] = PrivateAttr(default_factory=dict)

    @field_validator("rows")
    @classmethod
    def validate_rows(cls, rows: tuple[tuple[str, ...], ...]) -> tuple[tuple[str, ...], ...]:
        size = len(rows)
        if size < 2:
            raise ValueError("Grid must have at least 2 rows")
        if any(len(row) != size for row in rows):
            raise ValueError(f"Grid must be square ({size}x{size})")
        flat = [symbol for row in rows for symbol in row]
        if any(len(symbol) != 1 for symbol in flat):
            raise ValueError("Grid symbols must be single characters")
        if len(set(flat)) != len(flat):
            raise ValueError("Grid symbols must be distinct")
        return rows

    def model_post_init(self, __context: object) -> None:
        for r, row in enumerate(self.rows):
            for c, symbol in enumerate(row):
                self._positions.setdefault(symbol, (r, c))

    @classmethod
    def from_symbols(cls, symbols: str) -> GridAlphabet:
        """Build from a row-major string whose length is a perfect square."""

        size = math.isqrt(len(symbols))
        if size * size != len(symbols):
            raise ValueError(f"Symbol count must be a perfect square, got {len(symbols)}")
        rows = tuple(tuple(symbols[r * size : (r + 1) * size]) for r in range(size))
        return cls(rows=rows)

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def symbols(self) -> str:
        return "".join(symbol for row in self.rows for symbol in row)

    def symbol_at(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def position(self, symbol: str) -> tuple[int, int] | None:
        return self._positions.get(symbol)

    def pattern(self, length: int) -> re.Pattern[str]:
        chars = "".join(re.escape(symbol) for symbol in self.symbols)
        return re.compile(f"[{chars}]{{{length}}}")

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions


class GridSpec(BaseModel):
    """Todo lo que el codec necesita saber: alfabeto, dominio y precisión."""

    model_config = ConfigDict(frozen=True)

    alphabet: GridAlphabet
    bounds: BoundingBox = Field(..., description="Dominio válido de codificación.")
    precision: int = Field(default=CODE_LENGTH, ge=1, le=15, description="Símbolos por código.")
    boundary_buffer: float = Field(
        default=BOUNDARY_BUFFER_DEGREES,
        ge=0.0,
        description="Franja (grados) junto al borde del dominio que genera avisos.",
    )
    separator: str = Field(default=CODE_SEPARATOR, max_length=1)

    @property
    def size(self) -> int:
        return self.alphabet.size


DIGIPIN_ALPHABET = GridAlphabet(rows=DIGIPIN_GRID)

DOMAIN_BOUNDS = BoundingBox(
    southwest=Coordinate(latitude=DOMAIN_MIN_LAT, longitude=DOMAIN_MIN_LON),
    northeast=Coordinate(latitude=DOMAIN_MAX_LAT, longitude=DOMAIN_MAX_LON),
)

DEFAULT_GRID_SPEC = GridSpec(alphabet=DIGIPIN_ALPHABET, bounds=DOMAIN_BOUNDS)
