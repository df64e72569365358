from __future__ import annotations

import json
import logging
from typing import List, Optional, Protocol

from albumshop.constants import CART_STORAGE_KEY
from albumshop.models import Album

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class CartStore:
    """
    Shopping cart for one browser session.

    At most one entry per album id. Every mutation is written to storage
    before it returns. Build one per session and hand it to whoever needs it.
    """

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._items: List[Album] = []
        self.is_open = False

    @property
    def items(self) -> List[Album]:
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total_price(self) -> float:
        return sum((item.price for item in self._items), 0.0)

    def is_in_cart(self, album_id: int) -> bool:
        return any(item.id == album_id for item in self._items)

    def add_to_cart(self, album: Album) -> None:
        if self.is_in_cart(album.id):
            return
        self._items.append(album.replace())
        self.save_cart()

    def remove_from_cart(self, album_id: int) -> None:
        self._items = [item for item in self._items if item.id != album_id]
        self.save_cart()

    def clear_cart(self) -> None:
        self._items = []
        self.save_cart()

    def save_cart(self) -> None:
        payload = json.dumps([item.to_dict() for item in self._items], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    def load_cart(self) -> None:
        saved = self.storage.get_item(self.key)
        if not saved:
            return
        try:
            data = json.loads(saved)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            items: List[Album] = []
            for entry in data:
                album = Album.from_dict(entry)
                if not any(i.id == album.id for i in items):
                    items.append(album)
        except (ValueError, RecursionError):
            logger.exception("Error loading cart from storage key %r, starting empty", self.key)
            self._items = []
            return
        self._items = items
        logger.info("cart restored: %s item(s)", len(items))

    # panel visibility, not persisted

    def open_cart(self) -> None:
        self.is_open = True

    def close_cart(self) -> None:
        self.is_open = False

    def toggle_cart(self) -> None:
        self.is_open = not self.is_open
