"""Exportación JSON / GeoJSON de celdas.

Por qué JSON:
- Interoperabilidad con SIG y otras herramientas (GeoJSON `FeatureCollection`).
- Permite guardar resultados de búsquedas sin depender de la salida Rich.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from core.domain.constants import CODE_SEPARATOR
from core.domain.models import DigipinCode


def code_to_feature(cell: DigipinCode, separator: str = CODE_SEPARATOR) -> dict[str, Any]:
    """Feature GeoJSON con el rectángulo de la celda como `Polygon`."""

    sw = cell.bounding_box.southwest
    ne = cell.bounding_box.northeast
    # GeoJSON usa [lon, lat] y anillos cerrados en sentido antihorario.
    ring = [
        [sw.longitude, sw.latitude],
        [ne.longitude, sw.latitude],
        [ne.longitude, ne.latitude],
        [sw.longitude, ne.latitude],
        [sw.longitude, sw.latitude],
    ]
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": {
            "code": cell.code,
            "formatted": cell.format(separator),
            "center_latitude": cell.center.latitude,
            "center_longitude": cell.center.longitude,
        },
    }


def codes_to_geojson(cells: Iterable[DigipinCode], separator: str = CODE_SEPARATOR) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [code_to_feature(cell, separator) for cell in cells],
    }


def _write_json(payload: Any, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def export_codes_json(*, cells: Iterable[DigipinCode], output_path: Path) -> Path:
    """Exporta las celdas como lista JSON UTF-8 con formato estable."""

    payload = [cell.model_dump(mode="json") for cell in cells]
    return _write_json(payload, output_path)


def export_codes_geojson(
    *,
    cells: Iterable[DigipinCode],
    output_path: Path,
    separator: str = CODE_SEPARATOR,
) -> Path:
    return _write_json(codes_to_geojson(cells, separator), output_path)


def export_codes(
    *,
    cells: Iterable[DigipinCode],
    output_path: Path,
    separator: str = CODE_SEPARATOR,
) -> Path:
    """Elige el formato por extensión: `.geojson` -> GeoJSON, resto -> JSON."""

    if output_path.suffix.lower() == ".geojson":
        return export_codes_geojson(cells=cells, output_path=output_path, separator=separator)
    return export_codes_json(cells=cells, output_path=output_path)
