import math

import pytest

from brandix.modules.estimator.calculator import DEFAULT_TILE_AREA, EstimateResult, estimate


def test_estimate_room_4_5_by_6():
    result = estimate(4.5, 6.0, 0.36)
    assert result == EstimateResult(total_area_sqm=27.0, tiles_required=83)


def test_estimate_room_3_by_3():
    result = estimate(3.0, 3.0, 0.36)
    assert result.total_area_sqm == 9.0
    assert result.tiles_required == 28


def test_wastage_applied_after_rounding():
    # 1.0 / 0.36 -> 2.78 -> 3 raw tiles -> 3.3 -> 4
    assert estimate(1.0, 1.0, 0.36).tiles_required == 4


def test_default_tile_area():
    assert DEFAULT_TILE_AREA == 0.36
    assert estimate(4.5, 6.0) == estimate(4.5, 6.0, 0.36)


def test_area_is_not_rounded():
    result = estimate(1.234, 2.0, 0.5)
    assert result.total_area_sqm == 1.234 * 2.0
    assert isinstance(result.tiles_required, int)


@pytest.mark.parametrize(
    "width,length,tile_area",
    [
        (0, 5, 0.36),
        (5, 0, 0.36),
        (-1, 5, 0.36),
        (5, 5, 0),
        (5, 5, -0.36),
        (None, 5, 0.36),
        (math.nan, 5, 0.36),
        (math.inf, 5, 0.36),
        ("4", 5, 0.36),
    ],
)
def test_invalid_inputs_produce_no_result(width, length, tile_area):
    assert estimate(width, length, tile_area) is None


def test_estimate_is_idempotent():
    assert estimate(4.5, 6.0, 0.36) == estimate(4.5, 6.0, 0.36)


def test_estimate_endpoint(client):
    r = client.post("/api/estimate", json={"width": 4.5, "length": 6.0, "tile_area": 0.36})
    assert r.status_code == 200
    assert r.json == {"total_area_sqm": 27.0, "tiles_required": 83, "unit_tile_area": 0.36}


def test_estimate_endpoint_uses_configured_tile_area(client):
    r = client.post("/api/estimate", json={"width": 3, "length": 3})
    assert r.status_code == 200
    assert r.json["tiles_required"] == 28
    assert r.json["unit_tile_area"] == 0.36


def test_estimate_endpoint_accepts_numeric_strings(client):
    r = client.post("/api/estimate", json={"width": "4.5", "length": "6"})
    assert r.status_code == 200
    assert r.json["tiles_required"] == 83


def test_estimate_endpoint_rejects_non_positive(client):
    r = client.post("/api/estimate", json={"width": 0, "length": 5})
    assert r.status_code == 422
    assert r.json["error"]["code"] == "invalid_input"


def test_estimate_endpoint_missing_fields(client):
    r = client.post("/api/estimate", json={"width": 4})
    assert r.status_code == 400
    assert r.json["error"]["code"] == "validation_error"
    assert r.json["error"]["details"]["missing"] == ["length"]


def test_estimate_endpoint_rejects_text(client):
    r = client.post("/api/estimate", json={"width": "wide", "length": 5})
    assert r.status_code == 400
    assert r.json["error"]["details"]["field"] == "width"


def test_estimate_endpoint_requires_json(client):
    r = client.post("/api/estimate", data="width=4")
    assert r.status_code == 400
    assert r.json["error"]["code"] == "invalid_json"


def test_estimate_overflowing_tile_count_produces_no_result():
    # area / tile_area is finite but the 10% buffer pushes it past float max
    assert estimate(1.7e308, 1.0, 1.0) is None


def test_estimate_endpoint_rejects_overflowing_room(client):
    r = client.post("/api/estimate", json={"width": 1.7e308, "length": 1.0, "tile_area": 1.0})
    assert r.status_code == 422
    assert r.json["error"]["code"] == "invalid_input"
