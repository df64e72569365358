from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from albumshop.models import Album

logger = logging.getLogger(__name__)


class AlbumApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AlbumApiClient:
    def __init__(self, base_url: str, http: Optional[httpx.Client] = None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.Client(timeout=timeout)
        self._owns_http = http is None

    def _url(self, path: str) -> str:
        # an injected client may carry its own base_url
        if self.base_url:
            return f"{self.base_url}{path}"
        return path

    def _get_json(self, path: str) -> Any:
        try:
            resp = self._http.get(self._url(path))
        except httpx.HTTPError as e:
            raise AlbumApiError(f"album API unreachable: {e}") from e

        if resp.status_code >= 400:
            try:
                message = resp.json().get("error") or resp.reason_phrase
            except (ValueError, AttributeError):
                message = resp.reason_phrase
            raise AlbumApiError(str(message), status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise AlbumApiError(f"album API returned invalid JSON for {path}") from e

    def list_albums(self) -> List[Album]:
        data = self._get_json("/albums")
        if not isinstance(data, list):
            raise AlbumApiError("album API returned a non-list for /albums")
        try:
            albums = [Album.from_dict(d) for d in data]
        except ValueError as e:
            raise AlbumApiError(f"album API returned a malformed album: {e}") from e
        logger.info("fetched %s album(s) from %s", len(albums), self.base_url or "api")
        return albums

    def get_album(self, album_id: int) -> Album:
        data = self._get_json(f"/albums/{album_id}")
        try:
            return Album.from_dict(data)
        except ValueError as e:
            raise AlbumApiError(f"album API returned a malformed album: {e}") from e

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
