from __future__ import annotations

import logging
from typing import List, Optional

from albumshop.models import Album
from albumshop.services.api_client import AlbumApiClient, AlbumApiError
from albumshop.services.cart import CartStore
from albumshop.viewer.i18n import Translator

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    Everything one browser session owns: the cart, the album list it
    fetched and the display language. There is exactly one per viewer.
    """

    def __init__(self, cart: CartStore, api: AlbumApiClient, translator: Translator, locale: Optional[str] = None):
        self.cart = cart
        self.api = api
        self.translator = translator
        self.locale = translator.ensure_locale(locale or translator.default_locale)
        self.albums: List[Album] = []
        self.load_error: Optional[str] = None
        self._loaded = False

        self.cart.load_cart()

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_albums(self) -> List[Album]:
        if not self._loaded:
            self.refresh_albums()
        return self.albums

    def refresh_albums(self) -> List[Album]:
        try:
            self.albums = self.api.list_albums()
            self.load_error = None
        except AlbumApiError as e:
            logger.error("Error fetching albums: %s", e)
            self.albums = []
            self.load_error = e.message
        self._loaded = True
        return self.albums

    def find_album(self, album_id: int) -> Optional[Album]:
        for album in self.albums:
            if album.id == album_id:
                return album
        return None

    def set_locale(self, locale: str) -> None:
        self.locale = self.translator.ensure_locale(locale)

    def t(self, key: str) -> str:
        return self.translator.t(key, self.locale)
