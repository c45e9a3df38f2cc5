"""Immutable tile records handed out by the catalog store."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TileRecord:
    """A catalog tile as read from the ``tiles`` table.

    ``size`` and ``finish`` are display strings; nothing parses them.
    """

    id: int
    name: str
    category: str
    size: str
    finish: str
    image_url: str
    description: str = ""

    @classmethod
    def from_model(cls, row: Any) -> "TileRecord":
        return cls(
            id=row.id,
            name=row.name,
            category=row.category,
            size=row.size,
            finish=row.finish,
            image_url=row.image_url,
            description=row.description or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
