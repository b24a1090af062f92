# FILE: centroid_engine/cli.py
# =============================================================================
# Centroid Engine — Typer CLI
#
# Commands
# --------
#   compute            Decode point records (JSON/YAML/GeoJSON), adapt, print centroid
#   demo               Built-in three-shape sample (KML + plain + GeoJSON points)
#   effective-config   Emit the resolved config (defaults + YAML + JSON overrides)
#   shapes             List point shapes with a registered LatLon adapter
#   version            Print package version
#
# Usage examples
# --------------
#   python -m centroid_engine compute points.json
#   python -m centroid_engine compute points.geojson -c configs/centroid.yaml \
#       -o '{"adapters": {"geojson_coordinate_order": "lon_lat"}}' --json
#   python -m centroid_engine demo
# =============================================================================

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from . import get_version
from .adapters import CoordinateOrder, adapt_all, registered_shapes
from .aggregate import NoPointsError, centroid
from .latlon import LatLonPoint
from .records import RecordError, load_records
from .shapes import GeoJsonPoint, GeoPoint, KmlPoint
from .utils.config_loader import resolve_config
from .utils.logging_utils import get_logger, init_logging

app = typer.Typer(add_completion=False, help="Centroid Engine — mean lat/lon over heterogeneous point shapes")
console = Console()

load_dotenv(override=False)

DEMO_POINTS = (
    KmlPoint(1.0, 2.0, 4.0),
    GeoPoint(3.0, 2.0),
    GeoJsonPoint((2.4, 5.0), None),
)


# =============================================================================
# Helpers
# =============================================================================


def _bootstrap(config: Optional[str], overrides: Optional[str], log_level: Optional[str]) -> Dict[str, Any]:
    cfg = resolve_config(config, overrides_json=overrides)
    if log_level:
        cfg["logging"]["level"] = log_level
    init_logging(cfg)
    return cfg


def _geojson_order(cfg: Dict[str, Any]) -> CoordinateOrder:
    raw = str(cfg.get("adapters", {}).get("geojson_coordinate_order", "lat_lon")).strip().lower()
    try:
        return CoordinateOrder(raw)
    except ValueError:
        raise typer.BadParameter(
            f"adapters.geojson_coordinate_order must be one of: {', '.join(o.value for o in CoordinateOrder)}"
        )


def _fmt(value: float, precision: Optional[int]) -> float:
    return round(value, int(precision)) if precision is not None else value


def _emit(result: LatLonPoint, count: int, cfg: Dict[str, Any], as_json: bool) -> None:
    precision = cfg.get("output", {}).get("precision")
    lat = _fmt(result.latitude, precision)
    lon = _fmt(result.longitude, precision)
    if as_json:
        typer.echo(json.dumps({"latitude": lat, "longitude": lon, "count": count}, indent=2))
        return
    table = Table(title="Centroid")
    table.add_column("points", justify="right")
    table.add_column("latitude", justify="right")
    table.add_column("longitude", justify="right")
    table.add_row(str(count), str(lat), str(lon))
    console.print(table)


def _fail(msg: str) -> None:
    typer.secho(msg, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2)


# =============================================================================
# Commands
# =============================================================================


@app.command("compute")
def cli_compute(
    input_path: str = typer.Argument(..., help="Point records: .json, .geojson, .yaml or .yml"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML."),
    overrides: Optional[str] = typer.Option(None, "--override", "-o", help="JSON string of overrides."),
    as_json: bool = typer.Option(False, "--json", help="Print the centroid as JSON."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging level (e.g. INFO, DEBUG)."),
):
    """Compute the centroid of every point in INPUT_PATH."""
    try:
        cfg = _bootstrap(config, overrides, log_level)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValueError as e:
        _fail(f"Invalid config: {e}")
    log = get_logger("centroid.cli")
    order = _geojson_order(cfg)

    try:
        shapes = load_records(input_path)
        points = adapt_all(shapes, geojson_order=order)
        result = centroid(points)
    except FileNotFoundError as e:
        _fail(str(e))
    except RecordError as e:
        _fail(f"Invalid input: {e}")
    except NoPointsError as e:
        _fail(f"Cannot compute centroid: {e}")

    log.info("Centroid of %d point(s): %s", len(points), result)
    _emit(result, len(points), cfg, as_json)


@app.command("demo")
def cli_demo(
    as_json: bool = typer.Option(False, "--json", help="Print the centroid as JSON."),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
):
    """Centroid of one KML point, one plain point and one GeoJSON point."""
    cfg = _bootstrap(None, None, log_level)
    points = adapt_all(DEMO_POINTS)
    result = centroid(points)
    get_logger("centroid.cli").info("Demo centroid: %s", result)
    _emit(result, len(points), cfg, as_json)


@app.command("effective-config")
def cli_effective_config(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config."),
    overrides: Optional[str] = typer.Option(None, "--override", "-o", help="JSON string of overrides."),
    out: Optional[str] = typer.Option(None, "--out", help="Write resolved config to this path (json|yaml)."),
):
    """Render the fully-resolved config (after JSON overrides)."""
    try:
        cfg = resolve_config(config, overrides_json=overrides)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValueError as e:
        _fail(f"Invalid config: {e}")
    if out:
        outp = Path(out)
        outp.parent.mkdir(parents=True, exist_ok=True)
        if outp.suffix.lower() in (".yml", ".yaml"):
            outp.write_text(yaml.safe_dump(cfg, sort_keys=False), encoding="utf-8")
        else:
            outp.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
        typer.echo(f"Wrote resolved config → {outp.as_posix()}")
    else:
        typer.echo(json.dumps(cfg, indent=2))


@app.command("shapes")
def cli_shapes():
    """List point shapes that have a LatLon adapter."""
    for t in registered_shapes():
        typer.echo(f"{t.__module__}.{t.__qualname__}")


@app.command("version")
def cli_version():
    typer.echo(get_version())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
