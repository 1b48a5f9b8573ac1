"""Command-line interface for tile stitcher."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from .config import get_config
from .models.manifest import GeoBounds, Manifest
from .models.window import RequestWindow
from .services.composition_service import CompositionService, FileTileLoader
from .services.info_service import summarize_zooms
from .services.prompt_service import apply_full_extent, apply_requested_bounds, negotiate

console = Console()

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool, default_level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else default_level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_bounds(ctx, param, value: Optional[str]) -> Optional[GeoBounds]:
    if value is None:
        return None
    try:
        return GeoBounds.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _ask(question: str) -> str:
    return click.prompt(question, default="", show_default=False)


def _load_manifest(path: Path) -> Manifest:
    try:
        return Manifest.from_json(path)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] Manifest not found: {escape(str(path))}")
        raise SystemExit(1)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] Couldn't parse metadata: {escape(str(exc))}")
        raise SystemExit(1)


def _print_info(manifest: Manifest) -> None:
    """Show the zoom range, bounds, per-zoom tile grid and covered area of a manifest."""
    summaries = summarize_zooms(manifest)
    pixel_size = manifest.tile_pixel_size

    console.print(f"Zoom levels: {manifest.min_zoom}-{manifest.max_zoom}", highlight=False)
    console.print(f"Lon/Lat Bounds: {manifest.bounds}")
    console.print(f"Scale: {manifest.scale}", highlight=False)
    console.print(f"Tile Size: {pixel_size}x{pixel_size}", highlight=False)

    table = Table(title="Tile Number Ranges")
    table.add_column("Zoom", style="cyan", justify="right")
    table.add_column("Top-left", style="green")
    table.add_column("Bottom-right", style="green")
    table.add_column("Tiles", justify="right")
    table.add_column("Image Size", justify="right")

    for summary in summaries:
        rect = summary.rect
        table.add_row(
            str(summary.zoom),
            f"({rect.min_x},{rect.min_y})",
            f"({rect.max_x},{rect.max_y})",
            f"{summary.width_tiles} x {summary.height_tiles} = {summary.tile_count}",
            f"{summary.width_pixels} x {summary.height_pixels} px",
        )

    console.print(table)

    covered = Table(title="Covered Bounds")
    covered.add_column("Zoom", style="cyan", justify="right")
    for name in ("West", "South", "East", "North"):
        covered.add_column(name, justify="right")

    for summary in summaries:
        bounds = summary.covered_bounds
        covered.add_row(
            str(summary.zoom),
            *(f"{value:.6f}" for value in (bounds.west, bounds.south, bounds.east, bounds.north)),
        )

    console.print(covered)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version="0.1.0")
@click.option("--zoom", "-z", type=click.IntRange(min=0), help="Zoom level")
@click.option("--bounds", "-b", callback=_parse_bounds, metavar="MINLON,MINLAT,MAXLON,MAXLAT",
              help="Only stitch tiles covering these bounds")
@click.option("--full", is_flag=True, help="Use all available tiles")
@click.option("--min-x", type=click.IntRange(min=0), help="Western tile column")
@click.option("--max-x", type=click.IntRange(min=0), help="Eastern tile column (exclusive)")
@click.option("--min-y", type=click.IntRange(min=0), help="Northern tile row")
@click.option("--max-y", type=click.IntRange(min=0), help="Southern tile row (exclusive)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output filename [default: output-ZOOM.png]")
@click.option("--manifest", "-m", "manifest_path", type=click.Path(dir_okay=False),
              help="Manifest file [default: metadata.json]")
@click.option("--tiles", "-t", "tiles_dir", type=click.Path(file_okay=False), help="Tile root directory")
@click.option("--info", is_flag=True, help="Print info found in manifest and exit")
@click.option("--verbose", "-v", is_flag=True, help="Enable DEBUG-level logging")
def main(
    zoom: Optional[int],
    bounds: Optional[GeoBounds],
    full: bool,
    min_x: Optional[int],
    max_x: Optional[int],
    min_y: Optional[int],
    max_y: Optional[int],
    output: Optional[str],
    manifest_path: Optional[str],
    tiles_dir: Optional[str],
    info: bool,
    verbose: bool,
):
    """Stitch a {zoom}/{x}/{y}.png tile pyramid into a single PNG.

    Reads the manifest (metadata.json by default) for bounds, zoom range and
    scale. Anything not given as an option is asked for interactively.
    """
    config = get_config()
    _setup_logging(verbose, config.log_level)

    manifest = _load_manifest(Path(manifest_path or config.manifest_filename))

    if info:
        _print_info(manifest)
        return

    if zoom is not None and zoom not in manifest.zoom_levels:
        logger.warning(
            "Zoom %d is outside the manifest range %d-%d", zoom, manifest.min_zoom, manifest.max_zoom,
        )

    window = RequestWindow(
        zoom=zoom,
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        scale=manifest.scale_factor,
        output_filename=output,
    )

    if full:
        if window.zoom is None:
            raise click.UsageError("argument '--full' requires argument '--zoom'")
        apply_full_extent(window, manifest)
    elif bounds is not None:
        if window.zoom is None:
            raise click.UsageError("argument '--bounds' requires argument '--zoom'")
        apply_requested_bounds(window, manifest, bounds)

    negotiate(window, manifest, _ask)

    try:
        resolved = window.freeze()
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise SystemExit(1)

    service = CompositionService(loader=FileTileLoader(tiles_dir or config.tiles_dir))
    width, height = service.canvas_size(resolved)
    console.print(f"Image size: {width}x{height}", highlight=False)

    if width <= 0 or height <= 0:
        console.print("[red]Error:[/red] Invalid image size")
        raise SystemExit(1)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Stitching zoom {resolved.zoom}...", total=resolved.tile_count)
        result = service.compose(
            resolved,
            progress=lambda done, total: progress.update(task, completed=done),
        )

    service.write(result, resolved.output_path)

    if result.missing:
        console.print(f"[yellow]Note:[/yellow] {len(result.missing)} tiles were missing")
    console.print(f"[green]Saved:[/green] {escape(str(resolved.output_path))}")
    console.print(f"Written {result.attempted} tiles.", highlight=False)


if __name__ == "__main__":
    main()
