from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

from albumshop.utils.validators import require_non_negative_number, require_text


@dataclass(frozen=True)
class Album:
    id: int
    title: str
    artist: str
    price: float
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **fields: Any) -> "Album":
        return replace(self, **fields)

    @classmethod
    def from_dict(cls, data: Any) -> "Album":
        if not isinstance(data, dict):
            raise ValueError(f"album must be an object, got {type(data).__name__}")

        missing = [k for k in ("id", "title", "artist", "price", "image_url") if k not in data]
        if missing:
            raise ValueError(f"album is missing: {', '.join(missing)}")

        album_id, price = data["id"], data["price"]
        if isinstance(album_id, bool) or not isinstance(album_id, int):
            raise ValueError("album id must be an integer")
        if album_id <= 0:
            raise ValueError("album id must be > 0")
        # stored and fetched prices are numbers already, never numeric strings
        if isinstance(price, str):
            raise ValueError("album price must be a number")

        return cls(
            id=album_id,
            title=require_text(data["title"], "album title"),
            artist=require_text(data["artist"], "album artist"),
            price=require_non_negative_number(price, "album price"),
            image_url=require_text(data["image_url"], "album image_url"),
        )
