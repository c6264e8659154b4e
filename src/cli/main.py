"""CLI principal (Typer + Rich).

Por qué una capa fina:
- Toda la lógica vive en `core.services.digipin.DigipinService`; aquí solo se
  parsean argumentos, se pinta el resultado y se decide el código de salida.
- Fallos -> mensaje en rojo y exit 1. Avisos -> amarillo, sin cambiar el exit.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.coordinate_lists import load_coordinates
from adapters.json_exporter import export_codes
from cli.doctor import app as doctor_app
from cli.ui_components import build_code_panel, build_codes_table, print_failure, print_warning
from core.config import AppSettings
from core.domain.models import Coordinate, DigipinCode
from core.domain.results import Result
from core.services.digipin import DigipinService, normalize_code

app = typer.Typer(no_args_is_help=True, help="DIGIPIN grid codec: encode, decode and search grid cells.")
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Carga la configuración una vez y comparte el servicio con los comandos."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[bold red]Invalid configuration[/bold red]: {exc}")
        raise typer.Exit(code=2) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    logger.debug("Grid domain: %s", settings.domain_bounds())
    ctx.obj = DigipinService(settings)


def _service(ctx: typer.Context) -> DigipinService:
    return ctx.obj


def _unwrap(result: Result[Any]) -> Any:
    """Devuelve el valor o termina con exit 1 tras pintar el error."""

    if not result.ok:
        print_failure(_err_console, result)
        raise typer.Exit(code=1)
    return result.value


def _cell_payload(cell: DigipinCode, separator: str) -> dict[str, Any]:
    payload = cell.model_dump(mode="json")
    payload["formatted"] = cell.format(separator)
    return payload


def _emit_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _emit_cells(
    cells: list[DigipinCode],
    *,
    separator: str,
    title: str,
    warning: str | None,
    json_output: bool,
    output: Optional[Path],
    origin: Coordinate | None = None,
) -> None:
    if output is not None:
        path = export_codes(cells=cells, output_path=output, separator=separator)
        _err_console.print(f"[green]Saved {len(cells)} cells to:[/green] {path}")

    if json_output:
        _emit_json({"cells": [_cell_payload(cell, separator) for cell in cells], "warning": warning})
        return

    _console.print(build_codes_table(cells, title=title, origin=origin, separator=separator))
    print_warning(_err_console, warning)


@app.command()
def encode(
    ctx: typer.Context,
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees."),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a panel."),
) -> None:
    """Encode a coordinate into its DIGIPIN code."""

    service = _service(ctx)
    result = service.encode(latitude, longitude)
    cell = _unwrap(result)

    if json_output:
        _emit_json({**_cell_payload(cell, service.grid.separator), "warning": result.warning})
        return
    _console.print(build_code_panel(cell, separator=service.grid.separator))
    print_warning(_err_console, result.warning)


@app.command()
def decode(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="DIGIPIN code (separators and lower case accepted)."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a panel."),
) -> None:
    """Decode a DIGIPIN code into its center and bounding box."""

    service = _service(ctx)
    result = service.decode(normalize_code(code, service.grid.separator))
    cell = _unwrap(result)

    if json_output:
        _emit_json(_cell_payload(cell, service.grid.separator))
        return
    _console.print(build_code_panel(cell, separator=service.grid.separator))


@app.command()
def info(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="DIGIPIN code."),
) -> None:
    """Show precision, area and a map link for a code."""

    service = _service(ctx)
    cell = _unwrap(service.decode(normalize_code(code, service.grid.separator)))
    precision = _unwrap(service.precision_description(cell))
    area = _unwrap(service.area_square_meters(cell))
    link = _unwrap(service.map_link(cell))
    panel = build_code_panel(
        cell,
        separator=service.grid.separator,
        precision=precision,
        area=area,
        link=link,
    )
    _console.print(panel)


@app.command()
def neighbors(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Center DIGIPIN code."),
    radius: int = typer.Option(1, "--radius", "-r", help="Grid radius in cells."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export to .json or .geojson."),
) -> None:
    """List the cells around a code."""

    service = _service(ctx)
    result = service.neighbors(normalize_code(code, service.grid.separator), radius)
    cells = _unwrap(result)
    _emit_cells(
        cells,
        separator=service.grid.separator,
        title=f"Neighbors (radius {radius})",
        warning=result.warning,
        json_output=json_output,
        output=output,
    )


@app.command(name="radius")
def radius_search(
    ctx: typer.Context,
    latitude: float = typer.Argument(..., help="Center latitude."),
    longitude: float = typer.Argument(..., help="Center longitude."),
    meters: float = typer.Argument(..., help="Search radius in meters."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export to .json or .geojson."),
) -> None:
    """Find the cells whose center lies within METERS of a point."""

    service = _service(ctx)
    center = _unwrap(Coordinate.create(latitude, longitude))
    result = service.within_radius(center, meters)
    cells = _unwrap(result)
    _emit_cells(
        cells,
        separator=service.grid.separator,
        title=f"Cells within {meters:g} m",
        warning=result.warning,
        json_output=json_output,
        output=output,
        origin=center,
    )


@app.command()
def distance(
    ctx: typer.Context,
    lat1: float = typer.Argument(...),
    lon1: float = typer.Argument(...),
    lat2: float = typer.Argument(...),
    lon2: float = typer.Argument(...),
) -> None:
    """Great-circle distance between two points, in meters."""

    a = _unwrap(Coordinate.create(lat1, lon1))
    b = _unwrap(Coordinate.create(lat2, lon2))
    meters = _unwrap(_service(ctx).distance_meters(a, b))
    _console.print(f"{meters:.2f} m")


@app.command()
def region(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="DIGIPIN code."),
    level: int = typer.Option(..., "--level", "-l", help="Number of leading symbols to keep."),
) -> None:
    """Show the ancestor cell formed by the first LEVEL symbols."""

    service = _service(ctx)
    result = service.region(normalize_code(code, service.grid.separator), level)
    box = _unwrap(result)
    _console.print(f"[bold]Level {level}[/bold]: SW {box.southwest}  NE {box.northeast}")
    print_warning(_err_console, result.warning)


@app.command()
def batch(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV or JSON coordinate list."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export to .json or .geojson."),
) -> None:
    """Encode every coordinate of a CSV/JSON file."""

    try:
        coordinates = load_coordinates(file)
    except (ValueError, ValidationError) as exc:
        _err_console.print(f"[bold red]Invalid input file[/bold red]: {exc}")
        raise typer.Exit(code=1) from exc

    service = _service(ctx)
    results = _unwrap(service.encode_batch(coordinates.pairs()))

    cells: list[DigipinCode] = []
    for row, result in zip(coordinates.coordinates, results):
        if result.ok:
            cells.append(result.value)
        else:
            label = row.label or f"({row.latitude}, {row.longitude})"
            _err_console.print(f"[red]Skipped[/red] {label}: {result.message}")

    _emit_cells(
        cells,
        separator=service.grid.separator,
        title=f"Encoded {file.name}",
        warning=None,
        json_output=json_output,
        output=output,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
