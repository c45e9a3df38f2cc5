"""Sample catalog loaded into an empty ``tiles`` table."""

from __future__ import annotations

import logging

from brandix.app.extensions import db
from brandix.app.models import Tile

logger = logging.getLogger(__name__)

# name, category, size, finish, image_url, description
SAMPLE_TILES = [
    (
        "Blue Marble Glossy", "Wall", "300x450mm", "Glossy",
        "https://picsum.photos/seed/blue-marble-tile/600/600",
        "Premium blue and white marble pattern glossy wall tiles.",
    ),
    (
        "Design 31096 Set", "Wall", "300x450mm", "Glossy",
        "https://picsum.photos/seed/marble-set-tile/600/600",
        "Elegant 3-piece wall tile set (31096 L, HL-1, D) with marble texture.",
    ),
    (
        "Design 113 (E)", "Marble", "600x1200mm", "Glossy",
        "https://picsum.photos/seed/large-marble-tile/600/600",
        "Large format premium glossy marble finish tiles (Design 113 E).",
    ),
    (
        "Pearl-11211 Heavy Duty", "Parking", "400x400mm", "Punch",
        "https://picsum.photos/seed/pearl-11211/600/600",
        "Heavy-duty parking tiles with circular punch design, 11mm thickness.",
    ),
    (
        "Grey Grid Punch", "Parking", "500x500mm", "Punch",
        "https://picsum.photos/seed/grey-grid-tile/600/600",
        "Industrial grey punch finish parking tiles with grid pattern.",
    ),
    (
        "Grey Stone Waves", "Parking", "500x500mm", "Punch",
        "https://picsum.photos/seed/stone-waves-tile/600/600",
        "Natural grey and tan stone wave texture parking tiles.",
    ),
    (
        "Brown Textured Stone", "Parking", "500x500mm", "Punch",
        "https://picsum.photos/seed/brown-stone-tile/600/600",
        "Durable brown textured stone finish parking tiles.",
    ),
]


def seed_tiles() -> int:
    """Insert the sample tiles if the table is empty.

    Safe to run multiple times; returns the number of rows inserted.
    """
    if db.session.query(Tile.id).first() is not None:
        return 0

    db.session.add_all(
        [
            Tile(name=name, category=category, size=size, finish=finish, image_url=image_url, description=description)
            for name, category, size, finish, image_url, description in SAMPLE_TILES
        ]
    )
    db.session.commit()
    logger.info("Seeded %d sample tiles", len(SAMPLE_TILES))
    return len(SAMPLE_TILES)
