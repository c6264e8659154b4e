"""Carga de listas de coordenadas desde disco.

Soporta:
- JSON: {"coordinates": [{"latitude": .., "longitude": .., "label": ..}, ...]}
        o directamente la lista.
- CSV:  cabecera con columnas `latitude`/`longitude` (o `lat`/`lon`/`lng`)
        y `label` opcional.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from adapters.coordinate_lists.models import CoordinateListFile, CoordinateRow

_LATITUDE_COLUMNS = ("latitude", "lat")
_LONGITUDE_COLUMNS = ("longitude", "lon", "lng")


def load_coordinate_json(path: Path) -> CoordinateListFile:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if isinstance(data, list):
        data = {"coordinates": data}
    return CoordinateListFile.model_validate(data)


def _pick(row: dict[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = row.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


def load_coordinate_csv(path: Path) -> CoordinateListFile:
    rows: list[CoordinateRow] = []
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for line_no, raw in enumerate(reader, start=2):
            row = {(k or "").strip().lower(): v for k, v in raw.items()}
            latitude = _pick(row, _LATITUDE_COLUMNS)
            longitude = _pick(row, _LONGITUDE_COLUMNS)
            if latitude is None or longitude is None:
                raise ValueError(f"{path.name}:{line_no}: missing latitude/longitude column")
            rows.append(
                CoordinateRow(
                    latitude=float(latitude),
                    longitude=float(longitude),
                    label=_pick(row, ("label", "name")),
                )
            )
    return CoordinateListFile(coordinates=rows)


def load_coordinates(path: Path) -> CoordinateListFile:
    """Elige el loader por extensión (`.csv` o JSON por defecto)."""

    if path.suffix.lower() == ".csv":
        return load_coordinate_csv(path)
    return load_coordinate_json(path)
