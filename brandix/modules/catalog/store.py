"""Read-only access to the tile catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from brandix.app.models import Tile
from brandix.modules.catalog.records import TileRecord

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalog store failures."""


class NotFoundError(CatalogError):
    def __init__(self, tile_id: int):
        super().__init__(f"Tile {tile_id} not found")
        self.tile_id = tile_id


class UnavailableError(CatalogError):
    """The backing database could not be queried."""


@dataclass
class CatalogStore:
    """Thin wrapper around a SQLAlchemy session for reading tiles."""

    session: Session

    def list_tiles(self) -> List[TileRecord]:
        """Return every tile in insertion order."""
        try:
            rows = self.session.execute(select(Tile).order_by(Tile.id.asc())).scalars().all()
        except SQLAlchemyError as exc:
            raise UnavailableError("Tile catalog is unavailable") from exc
        return [TileRecord.from_model(row) for row in rows]

    def get_tile(self, tile_id: int) -> TileRecord:
        try:
            row = self.session.get(Tile, tile_id)
        except SQLAlchemyError as exc:
            raise UnavailableError("Tile catalog is unavailable") from exc
        if row is None:
            raise NotFoundError(tile_id)
        return TileRecord.from_model(row)


def load_catalog(store: CatalogStore) -> List[TileRecord]:
    """List tiles, treating an unreachable store as an empty catalog."""
    try:
        return store.list_tiles()
    except UnavailableError:
        logger.warning("Catalog store unavailable; serving an empty catalog", exc_info=True)
        return []
