"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, read_env_file, write_user_env_vars
from core.services.digipin import DigipinService

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and grid self-checks.")

_console = Console()


def _check_roundtrip(service: DigipinService) -> tuple[bool, str]:
    """Codifica el centro del dominio y comprueba que la celda lo contiene."""

    center = service.grid.bounds.center
    encoded = service.encode(center.latitude, center.longitude)
    if not encoded.ok:
        return False, encoded.message

    decoded = service.decode(encoded.value.code)
    if not decoded.ok:
        return False, decoded.message
    if not decoded.value.bounding_box.contains(center):
        return False, f"{decoded.value.code} does not contain {center}"
    return True, f"{center} -> {service.format_code(encoded.value)}"


@app.command()
def run() -> None:
    """Show the active configuration and run a grid self-check."""

    print_banner(_console)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[bold red]Invalid configuration[/bold red]: {exc}")
        raise typer.Exit(code=2) from exc

    table = Table(title="DIGIPIN Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    if env_file.exists():
        table.add_row("User config", "OK", f"{env_file} ({len(read_env_file(env_file))} keys)")
    else:
        table.add_row("User config", "OPTIONAL", f"{env_file} (not created)")
    table.add_row("Domain", "OK", str(settings.domain_bounds()))
    table.add_row("Alphabet", "OK", settings.grid_symbols)
    table.add_row("Precision", "OK", f"{settings.precision} symbols")
    table.add_row("Neighbor limit", "OK", f"{settings.max_grid_radius} cells")

    service = DigipinService(settings)
    ok_roundtrip, detail_roundtrip = _check_roundtrip(service)
    table.add_row("Encode/decode", "OK" if ok_roundtrip else "FAIL", detail_roundtrip)

    _console.print(table)

    if not ok_roundtrip:
        raise typer.Exit(code=1)


@app.command(name="setup-domain")
def setup_domain() -> None:
    """Interactive domain setup (stores config in the user config .env)."""

    defaults = AppSettings()

    min_lat = typer.prompt("South latitude", default=defaults.domain_min_lat, type=float)
    max_lat = typer.prompt("North latitude", default=defaults.domain_max_lat, type=float)
    min_lon = typer.prompt("West longitude", default=defaults.domain_min_lon, type=float)
    max_lon = typer.prompt("East longitude", default=defaults.domain_max_lon, type=float)

    if min_lat >= max_lat or min_lon >= max_lon:
        raise typer.BadParameter("south/west must be lower than north/east")

    env_path = write_user_env_vars(
        {
            "DIGIPIN_DOMAIN_MIN_LAT": str(min_lat),
            "DIGIPIN_DOMAIN_MAX_LAT": str(max_lat),
            "DIGIPIN_DOMAIN_MIN_LON": str(min_lon),
            "DIGIPIN_DOMAIN_MAX_LON": str(max_lon),
        }
    )

    _console.print(f"[green]Saved domain config to:[/green] {env_path}")
