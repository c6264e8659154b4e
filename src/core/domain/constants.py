"""Constantes de la rejilla DIGIPIN (despliegue de referencia).

Estos valores son solo *defaults*: el codec los recibe inyectados a través de
`GridSpec`, y `AppSettings` permite sobrescribirlos por entorno.
"""

from __future__ import annotations

DIGIPIN_GRID: tuple[tuple[str, ...], ...] = (
    ("F", "C", "9", "8"),
    ("J", "3", "2", "7"),
    ("K", "4", "5", "6"),
    ("L", "M", "P", "T"),
)

DOMAIN_MIN_LAT = 2.5
DOMAIN_MAX_LAT = 38.5
DOMAIN_MIN_LON = 63.5
DOMAIN_MAX_LON = 99.5
BOUNDARY_BUFFER_DEGREES = 0.1

CODE_LENGTH = 10
CODE_SEPARATOR = "-"
# 3-3-4 -> "39J-49L-L8T4"
FORMAT_GROUPS: tuple[int, ...] = (3, 3, 4)

MAX_GRID_RADIUS = 100
MAX_SEARCH_RADIUS_METERS = 1_000_000.0
LOW_PRECISION_THRESHOLD = 8

EARTH_RADIUS_METERS = 6_371_000.0
DEFAULT_MAPS_BASE_URL = "https://www.google.com/maps"
