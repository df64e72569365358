from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from albumshop.constants import (
    ALBUM_FIELDS,
    ALBUM_NOT_FOUND,
    ID_MAX_PLUS_ONE,
    ID_MONOTONIC,
    ID_POLICIES,
    SEED_ALBUMS,
)
from albumshop.models import Album
from albumshop.utils.validators import require_non_negative_number, require_text

logger = logging.getLogger(__name__)


class AlbumStoreError(Exception):
    pass


class AlbumNotFoundError(AlbumStoreError, LookupError):
    def __init__(self, album_id: int):
        self.album_id = album_id
        super().__init__(ALBUM_NOT_FOUND)


class AlbumValidationError(AlbumStoreError, ValueError):
    pass


def _clean_field(name: str, value: Any) -> Any:
    try:
        if name == "price":
            return require_non_negative_number(value, name)
        return require_text(value, name)
    except ValueError as e:
        raise AlbumValidationError(str(e)) from None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class AlbumStore:
    """
    In-memory album catalog, insertion order preserved.

    Not synchronized: the API serves one request at a time against it.
    """

    def __init__(
        self,
        seed: Optional[Iterable[Mapping[str, Any]]] = SEED_ALBUMS,
        id_policy: str = ID_MAX_PLUS_ONE,
    ):
        if id_policy not in ID_POLICIES:
            raise ValueError(f"unknown id policy: {id_policy}")
        self.id_policy = id_policy
        self._seed = [Album.from_dict(dict(a)) for a in (seed or ())]
        self._albums: List[Album] = []
        self._high_water = 0
        self.reset()

    def __len__(self) -> int:
        return len(self._albums)

    def reset(self) -> None:
        self._albums = list(self._seed)
        self._high_water = max((a.id for a in self._albums), default=0)

    def _index_of(self, album_id: int) -> int:
        for i, a in enumerate(self._albums):
            if a.id == album_id:
                return i
        raise AlbumNotFoundError(album_id)

    def _next_id(self) -> int:
        if self.id_policy == ID_MONOTONIC:
            return self._high_water + 1
        return max((a.id for a in self._albums), default=0) + 1

    def list(self) -> List[Album]:
        return list(self._albums)

    def get(self, album_id: int) -> Album:
        return self._albums[self._index_of(album_id)]

    def create(self, title: Any, artist: Any, price: Any, image_url: Any) -> Album:
        values = {"title": title, "artist": artist, "price": price, "image_url": image_url}
        missing = [k for k in ALBUM_FIELDS if _is_missing(values[k])]
        if missing:
            raise AlbumValidationError(f"Missing required fields: {', '.join(missing)}")

        cleaned = {k: _clean_field(k, v) for k, v in values.items()}
        album = Album(id=self._next_id(), **cleaned)
        self._albums.append(album)
        self._high_water = max(self._high_water, album.id)
        logger.info("album created id=%s title=%r", album.id, album.title)
        return album

    def update(self, album_id: int, fields: Mapping[str, Any]) -> Album:
        idx = self._index_of(album_id)
        changes: Dict[str, Any] = {
            k: _clean_field(k, fields[k])
            for k in ALBUM_FIELDS
            if k in fields and fields[k] is not None
        }
        album = self._albums[idx].replace(**changes)
        self._albums[idx] = album
        logger.info("album updated id=%s fields=%s", album_id, sorted(changes))
        return album

    def delete(self, album_id: int) -> Album:
        album = self._albums.pop(self._index_of(album_id))
        logger.info("album deleted id=%s", album_id)
        return album
