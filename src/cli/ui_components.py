"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos (encode, decode, info...).
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.constants import CODE_SEPARATOR
from core.domain.models import Coordinate, DigipinCode
from core.domain.results import Failure
from core.geo import distance_meters


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en comandos interactivos)."""

    title = Text("DIGIPIN", style="bold cyan")
    subtitle = Text("Grid codec • Neighbors • Radius search", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_warning(console: Console, warning: str | None) -> None:
    if warning:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def print_failure(console: Console, result: Failure) -> None:
    console.print(f"[bold red]{result.kind.value}[/bold red]: {result.message}")
    print_warning(console, result.warning)


def build_code_panel(
    cell: DigipinCode,
    *,
    separator: str = CODE_SEPARATOR,
    precision: str | None = None,
    area: float | None = None,
    link: str | None = None,
) -> Panel:
    """Panel con el detalle de una celda."""

    box = cell.bounding_box
    body = Text()
    body.append("Code:      ", style="bold")
    body.append(f"{cell.format(separator)}\n", style="bright_green")
    body.append("Center:    ", style="bold")
    body.append(f"{cell.center.latitude:.6f}, {cell.center.longitude:.6f}\n")
    body.append("Southwest: ", style="bold")
    body.append(f"{box.southwest.latitude:.6f}, {box.southwest.longitude:.6f}\n")
    body.append("Northeast: ", style="bold")
    body.append(f"{box.northeast.latitude:.6f}, {box.northeast.longitude:.6f}")
    if precision:
        body.append("\nPrecision: ", style="bold")
        body.append(precision)
    if area is not None:
        body.append("\nArea:      ", style="bold")
        body.append(f"{area:.2f} m²")
    if link:
        body.append("\nMap:       ", style="bold")
        body.append(link, style="magenta")

    return Panel(body, title=Text(cell.code, style="bold cyan"), border_style="cyan")


def build_codes_table(
    cells: Iterable[DigipinCode],
    *,
    title: str,
    origin: Coordinate | None = None,
    separator: str = CODE_SEPARATOR,
) -> Table:
    """Tabla de celdas; con `origin` añade la distancia al punto de búsqueda."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Code", style="bright_green", no_wrap=True)
    table.add_column("Latitude", style="white", justify="right")
    table.add_column("Longitude", style="white", justify="right")
    if origin is not None:
        table.add_column("Distance (m)", style="magenta", justify="right")

    for index, cell in enumerate(cells, start=1):
        row = [
            str(index),
            cell.format(separator),
            f"{cell.center.latitude:.6f}",
            f"{cell.center.longitude:.6f}",
        ]
        if origin is not None:
            row.append(f"{distance_meters(origin, cell.center):.1f}")
        table.add_row(*row)
    return table
