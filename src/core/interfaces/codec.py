"""Contrato del codec de celdas.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- `SpatialQueryEngine` funciona con cualquier codec que respete estas firmas
  (p.ej. un codec con otro dominio o un doble de test).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.grid import GridSpec
from core.domain.models import BoundingBox, Coordinate, DigipinCode
from core.domain.results import Result


@runtime_checkable
class CellCodec(Protocol):
    """Contrato mínimo de un codec de rejilla.

    Reglas de diseño:
    - Ninguna operación lanza: fallos y avisos viajan en el `Result`.
    - `grid` expone el dominio para filtrar candidatos fuera de él.
    """

    grid: GridSpec

    def encode(self, coordinate: Coordinate) -> Result[DigipinCode]:
        """Codifica una coordenada del dominio a su celda."""

        ...

    def decode(self, code: str) -> Result[tuple[Coordinate, BoundingBox]]:
        """Decodifica un código a (centro, caja)."""

        ...
