"""Modelos para listas de coordenadas (entrada de `digipin batch`).

Importante:
- Aquí no se valida el rango lat/lon: eso lo hace `validate_coordinate_list`
  para poder informar del primer índice inválido con un error tipado.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoordinateRow(BaseModel):
    latitude: float
    longitude: float
    label: str | None = Field(default=None, max_length=256)

    def as_pair(self) -> tuple[float, float]:
        return self.latitude, self.longitude


class CoordinateListFile(BaseModel):
    coordinates: list[CoordinateRow] = Field(default_factory=list)

    def pairs(self) -> list[tuple[float, float]]:
        return [row.as_pair() for row in self.coordinates]
