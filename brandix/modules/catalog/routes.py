from __future__ import annotations

from flask import Blueprint, request

from brandix.app.extensions import db
from brandix.app.common.errors import abort_json
from brandix.modules.catalog.query import ALL_CATEGORIES, distinct_categories, filter_catalog
from brandix.modules.catalog.store import CatalogStore, NotFoundError, UnavailableError, load_catalog

bp = Blueprint("catalog", __name__)


def get_store() -> CatalogStore:
    return CatalogStore(db.session)


@bp.get("/tiles")
def list_tiles():
    """GET /api/tiles - Retrieve the catalog in insertion order.

    Query params (optional, same rules as the client-side filter):
      - q: case-insensitive text matched against name and description
      - category: exact category name, or All
    """
    try:
        tiles = get_store().list_tiles()
    except UnavailableError:
        abort_json(503, "service_unavailable", "Tile catalog is unavailable")

    search = request.args.get("q", "")
    category = request.args.get("category") or ALL_CATEGORIES
    if search or category != ALL_CATEGORIES:
        tiles = filter_catalog(tiles, search, category)

    return [t.to_dict() for t in tiles], 200


@bp.get("/tiles/<int:tile_id>")
def get_tile(tile_id: int):
    """GET /api/tiles/<id> - Retrieve tile details."""
    try:
        tile = get_store().get_tile(tile_id)
    except NotFoundError:
        abort_json(404, "not_found", "Tile not found")
    except UnavailableError:
        abort_json(503, "service_unavailable", "Tile catalog is unavailable")

    return tile.to_dict(), 200


@bp.get("/categories")
def list_categories():
    """GET /api/categories - Filter options, starting with All."""
    return {"categories": distinct_categories(load_catalog(get_store()))}, 200
