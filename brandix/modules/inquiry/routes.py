from __future__ import annotations

import logging

from flask import Blueprint, current_app

from brandix.app.extensions import db
from brandix.app.common.errors import abort_json
from brandix.app.common.validation import get_json, id_field, require_fields, text_field
from brandix.modules.catalog.store import CatalogStore, NotFoundError, UnavailableError
from brandix.modules.inquiry.notifications import (
    CATALOG_REQUEST_MESSAGE,
    Inquiry,
    build_notifier,
    build_whatsapp_url,
    format_inquiry_message,
    format_tile_inquiry_message,
    relay,
)

logger = logging.getLogger(__name__)

bp = Blueprint("inquiry", __name__)


def _whatsapp_url(text: str) -> str:
    return build_whatsapp_url(current_app.config["WHATSAPP_NUMBER"], text)


def _lookup_tile(tile_id: int):
    try:
        return CatalogStore(db.session).get_tile(tile_id)
    except NotFoundError:
        abort_json(404, "not_found", "Tile not found")
    except UnavailableError:
        abort_json(503, "service_unavailable", "Tile catalog is unavailable")


@bp.post("/inquiry")
def submit_inquiry():
    """POST /api/inquiry - Relay a contact form inquiry.

    Nothing is stored. The inquiry is logged, posted to the webhook when one
    is configured, and returned as a WhatsApp deep link for the browser.
    """
    data = get_json()
    require_fields(data, ["name", "email", "message"])

    name = text_field(data, "name")
    email = text_field(data, "email")
    message = text_field(data, "message")
    tile_id = id_field(data, "tile_id") if data.get("tile_id") is not None else None

    tile = _lookup_tile(tile_id) if tile_id is not None else None
    inquiry = Inquiry(
        name=name,
        email=email,
        message=message,
        project_type=str(data.get("project_type") or "").strip(),
        tile=tile,
    )
    logger.info(
        "Inquiry received from %s (%s) for tile %s: %s",
        inquiry.name,
        inquiry.email,
        tile.id if tile else None,
        inquiry.message,
    )

    text = format_inquiry_message(inquiry)
    relayed = relay(build_notifier(current_app.config), text)

    return {
        "success": True,
        "message": "Inquiry sent successfully!",
        "whatsapp_url": _whatsapp_url(text),
        "relayed": relayed,
    }, 200


@bp.get("/tiles/<int:tile_id>/inquiry")
def tile_inquiry_link(tile_id: int):
    """GET /api/tiles/<id>/inquiry - WhatsApp link asking about one tile."""
    tile = _lookup_tile(tile_id)
    return {"tile_id": tile.id, "whatsapp_url": _whatsapp_url(format_tile_inquiry_message(tile))}, 200


@bp.get("/catalog/request")
def catalog_request_link():
    """GET /api/catalog/request - WhatsApp link asking for the PDF catalog."""
    return {"whatsapp_url": _whatsapp_url(CATALOG_REQUEST_MESSAGE)}, 200
