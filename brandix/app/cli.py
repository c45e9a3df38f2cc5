from __future__ import annotations

import click
from flask import Blueprint, current_app

from brandix.app.extensions import db
from brandix.app.seed import seed_tiles
from brandix.modules.catalog.query import ALL_CATEGORIES, filter_catalog
from brandix.modules.catalog.store import CatalogStore, load_catalog
from brandix.modules.estimator.calculator import estimate

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("seed")
def seed_data() -> None:
    """Create the tiles table and load the sample catalog.

    Safe to run multiple times; it will no-op if data exists.
    """
    db.create_all()
    inserted = seed_tiles()
    if inserted:
        click.echo(f"Seed complete. {inserted} tiles added.")
    else:
        click.echo("Catalog already has tiles; nothing to seed.")


@cli_bp.cli.command("search")
@click.option("--q", "search", default="", help="Text matched against tile name and description.")
@click.option("--category", default=ALL_CATEGORIES, show_default=True)
def search_tiles(search: str, category: str) -> None:
    """List catalog tiles matching a search and category."""
    tiles = filter_catalog(load_catalog(CatalogStore(db.session)), search, category)
    if not tiles:
        click.echo("No tiles found.")
        return
    for tile in tiles:
        click.echo(f"{tile.id}\t{tile.name}\t{tile.category}\t{tile.size}\t{tile.finish}")


@cli_bp.cli.command("estimate")
@click.argument("width", type=float)
@click.argument("length", type=float)
@click.option("--tile-area", type=float, default=None, help="Square meters per tile.")
def estimate_tiles(width: float, length: float, tile_area: float | None) -> None:
    """Estimate tiles for a WIDTH x LENGTH meter room."""
    if tile_area is None:
        tile_area = current_app.config["DEFAULT_TILE_AREA"]
    result = estimate(width, length, tile_area)
    if result is None:
        raise click.BadParameter("width, length and tile area must be greater than zero")
    click.echo(f"Area: {result.total_area_sqm:.2f} m2")
    click.echo(f"Tiles required (incl. 10% wastage): {result.tiles_required}")
