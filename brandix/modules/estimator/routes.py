from __future__ import annotations

from flask import Blueprint, current_app

from brandix.app.common.errors import abort_json
from brandix.app.common.validation import get_json, number_field, require_fields
from brandix.modules.estimator.calculator import estimate

bp = Blueprint("estimator", __name__)


@bp.post("/estimate")
def estimate_tiles():
    """POST /api/estimate - Tiles needed for a room, with 10% wastage.

    Body: {"width": m, "length": m, "tile_area": m2 (optional)}
    """
    data = get_json()
    require_fields(data, ["width", "length"])
    width = number_field(data, "width")
    length = number_field(data, "length")
    if data.get("tile_area") is None:
        tile_area = current_app.config["DEFAULT_TILE_AREA"]
    else:
        tile_area = number_field(data, "tile_area")

    result = estimate(width, length, tile_area)
    if result is None:
        abort_json(
            422,
            "invalid_input",
            "Width, length and tile area must be greater than zero",
            {"width": width, "length": length, "tile_area": tile_area},
        )

    return {**result.to_dict(), "unit_tile_area": tile_area}, 200
