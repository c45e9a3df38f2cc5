"""Tile quantity estimate for a rectangular room."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_TILE_AREA = 0.36  # 60x60cm
WASTAGE_FACTOR = 1.10


@dataclass(frozen=True)
class EstimateResult:
    total_area_sqm: float
    tiles_required: int

    def to_dict(self) -> dict:
        return {"total_area_sqm": self.total_area_sqm, "tiles_required": self.tiles_required}


def _positive(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def estimate(width: float, length: float, unit_tile_area: float = DEFAULT_TILE_AREA) -> Optional[EstimateResult]:
    """Tiles needed to cover ``width`` x ``length`` meters, plus 10% wastage.

    The raw count is rounded up before the wastage buffer is applied, and the
    buffered count is rounded up again. Returns ``None`` when any input is
    missing, non-positive or not a finite number, or when the tile count
    itself would overflow a float.
    """
    if not (_positive(width) and _positive(length) and _positive(unit_tile_area)):
        return None

    area = width * length
    tiles = area / unit_tile_area
    if not math.isfinite(tiles):
        return None
    buffered = math.ceil(tiles) * WASTAGE_FACTOR
    if not math.isfinite(buffered):
        return None
    return EstimateResult(total_area_sqm=area, tiles_required=math.ceil(buffered))
