"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El dominio y el alfabeto de la rejilla son configuración, no constantes
  cableadas en el algoritmo: `AppSettings.grid_spec()` los inyecta al codec.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.constants import (
    BOUNDARY_BUFFER_DEGREES,
    CODE_LENGTH,
    CODE_SEPARATOR,
    DEFAULT_MAPS_BASE_URL,
    DOMAIN_MAX_LAT,
    DOMAIN_MAX_LON,
    DOMAIN_MIN_LAT,
    DOMAIN_MIN_LON,
    MAX_GRID_RADIUS,
    MAX_SEARCH_RADIUS_METERS,
)
from core.domain.grid import DIGIPIN_ALPHABET, GridAlphabet, GridSpec
from core.domain.models import BoundingBox, Coordinate


APP_DIR_NAME = "digipin-codec"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (Windows, macOS o XDG)."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Lee `CLAVE=valor` ignorando comentarios, líneas vacías y comillas."""

    if not path.exists():
        return {}

    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = value.strip().strip("\"'")
    return values


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env de usuario (claves ordenadas) y devuelve su ruta."""

    env_path = env_path or get_user_env_file()
    merged = read_env_file(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(f"# {APP_DIR_NAME} user config (.env)\n{body}", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Parámetros de la rejilla y de la CLI.

    Precedencia: argumentos del constructor, variables `DIGIPIN_*`, `.env` del
    proyecto y por último el `.env` de usuario que escribe `doctor setup-domain`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIGIPIN_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    domain_min_lat: float = Field(default=DOMAIN_MIN_LAT, ge=-90.0, le=90.0, description="Latitud sur del dominio.")
    domain_max_lat: float = Field(default=DOMAIN_MAX_LAT, ge=-90.0, le=90.0, description="Latitud norte del dominio.")
    domain_min_lon: float = Field(default=DOMAIN_MIN_LON, ge=-180.0, le=180.0, description="Longitud oeste del dominio.")
    domain_max_lon: float = Field(default=DOMAIN_MAX_LON, ge=-180.0, le=180.0, description="Longitud este del dominio.")
    boundary_buffer_degrees: float = Field(
        default=BOUNDARY_BUFFER_DEGREES,
        ge=0.0,
        description="Franja junto al borde del dominio que genera avisos (grados).",
    )

    precision: int = Field(
        default=CODE_LENGTH,
        ge=1,
        le=15,
        description="Número de símbolos (niveles de subdivisión) por código.",
    )
    grid_symbols: str = Field(
        default=DIGIPIN_ALPHABET.symbols,
        min_length=4,
        description="Alfabeto de la rejilla, fila a fila de norte a sur (longitud = cuadrado perfecto).",
    )
    code_separator: str = Field(
        default=CODE_SEPARATOR,
        max_length=1,
        description="Separador del formato agrupado 3-3-4.",
    )

    max_grid_radius: int = Field(
        default=MAX_GRID_RADIUS,
        ge=1,
        le=1000,
        description="Radio máximo (en celdas) que recorre la búsqueda de vecinos.",
    )
    max_search_radius_meters: float = Field(
        default=MAX_SEARCH_RADIUS_METERS,
        gt=0,
        description="Por encima de este radio la búsqueda avisa de resultados incompletos.",
    )

    maps_base_url: str = Field(
        default=DEFAULT_MAPS_BASE_URL,
        min_length=8,
        description="Base URL para los enlaces de mapa.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )

    @model_validator(mode="after")
    def check_domain(self) -> AppSettings:
        if self.domain_min_lat >= self.domain_max_lat:
            raise ValueError("domain_min_lat must be < domain_max_lat")
        if self.domain_min_lon >= self.domain_max_lon:
            raise ValueError("domain_min_lon must be < domain_max_lon")
        # Falla aquí (y no en el codec) si el alfabeto no es válido.
        try:
            GridAlphabet.from_symbols(self.grid_symbols)
        except ValueError as exc:
            raise ValueError(f"Invalid grid_symbols: {exc}") from exc
        return self

    def domain_bounds(self) -> BoundingBox:
        return BoundingBox(
            southwest=Coordinate(latitude=self.domain_min_lat, longitude=self.domain_min_lon),
            northeast=Coordinate(latitude=self.domain_max_lat, longitude=self.domain_max_lon),
        )

    def grid_spec(self) -> GridSpec:
        return GridSpec(
            alphabet=GridAlphabet.from_symbols(self.grid_symbols),
            bounds=self.domain_bounds(),
            precision=self.precision,
            boundary_buffer=self.boundary_buffer_degrees,
            separator=self.code_separator,
        )
