"""Outbound relay of customer inquiries.

The site hands inquiries to WhatsApp through a ``wa.me`` deep link opened by
the browser. When ``INQUIRY_WEBHOOK_URL`` is set, the same text is also posted
to that webhook (Slack-compatible ``{"text": ...}`` payload).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol
from urllib.parse import quote

import requests

from brandix.modules.catalog.records import TileRecord

logger = logging.getLogger(__name__)

WHATSAPP_ENDPOINT = "https://wa.me"
SITE_NAME = "Brandix Ceramic"
CATALOG_REQUEST_MESSAGE = "I would like to receive the full PDF catalog."


class Notifier(Protocol):
    def send(self, message: str) -> None:
        ...


@dataclass(frozen=True)
class Inquiry:
    name: str
    email: str
    message: str
    project_type: str = ""
    tile: Optional[TileRecord] = None


@dataclass
class WebhookNotifier:
    """Post messages to an incoming webhook."""

    webhook_url: str
    timeout: int = 10

    def send(self, message: str) -> None:
        response = requests.post(
            self.webhook_url,
            json={"text": message},
            timeout=self.timeout,
        )
        response.raise_for_status()


def build_notifier(config: Mapping[str, Any]) -> Notifier | None:
    """Construct the webhook notifier, or ``None`` when none is configured."""
    webhook_url = (config.get("INQUIRY_WEBHOOK_URL") or "").strip()
    if not webhook_url:
        return None
    return WebhookNotifier(webhook_url=webhook_url, timeout=int(config.get("NOTIFY_TIMEOUT", 10)))


def relay(notifier: Notifier | None, message: str) -> bool:
    """Deliver once, inside the caller's request.

    The send blocks for at most the notifier's timeout (``NOTIFY_TIMEOUT``).
    Failures are logged and reported as ``False``, never raised.
    """
    if notifier is None:
        return False
    try:
        notifier.send(message)
    except Exception:  # noqa: BLE001
        logger.exception("Failed to deliver inquiry via %s", type(notifier).__name__)
        return False
    return True


def build_whatsapp_url(number: str, text: str) -> str:
    return f"{WHATSAPP_ENDPOINT}/{number}?text={quote(text, safe='')}"


def format_inquiry_message(inquiry: Inquiry) -> str:
    lines = [
        f"*New Inquiry from {SITE_NAME} Website*",
        "",
        f"*Name:* {inquiry.name}",
        f"*Email:* {inquiry.email}",
        f"*Project:* {inquiry.project_type or 'N/A'}",
    ]
    if inquiry.tile is not None:
        lines.append(f"*Tile:* {inquiry.tile.name} ({inquiry.tile.size})")
    lines.append(f"*Message:* {inquiry.message}")
    return "\n".join(lines)


def format_tile_inquiry_message(tile: TileRecord) -> str:
    return f"*Inquiry for {tile.name}* ({tile.size})\n\nI would like to know more about this design."
