"""Shared pytest fixtures for album shop tests."""

import pytest
from fastapi.testclient import TestClient

from albumshop.db.albums import AlbumStore
from albumshop.db.local_storage import MemoryStorage
from albumshop.models import Album
from albumshop.services.api_client import AlbumApiClient
from albumshop.services.cart import CartStore
from albumshop.viewer.i18n import Translator
from albumshop.viewer.main import create_app as create_viewer_app
from albumshop.viewer.session import BrowserSession
from albumshop.web.main import create_app as create_api_app


@pytest.fixture
def store():
    """A fresh store holding the six seed albums."""
    return AlbumStore()


@pytest.fixture
def api(store):
    """Test client for the album API, bound to the `store` fixture."""
    with TestClient(create_api_app(store)) as c:
        yield c


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def cart(storage):
    return CartStore(storage)


@pytest.fixture
def album1():
    return Album(
        id=1,
        title="Test Album 1",
        artist="Test Artist 1",
        price=19.99,
        image_url="https://example.com/cover1.jpg",
    )


@pytest.fixture
def album2():
    return Album(
        id=2,
        title="Test Album 2",
        artist="Test Artist 2",
        price=24.99,
        image_url="https://example.com/cover2.jpg",
    )


@pytest.fixture
def session(api, storage):
    """A browser session talking to the real API app in-process."""
    return BrowserSession(
        cart=CartStore(storage),
        api=AlbumApiClient("", http=api),
        translator=Translator(),
    )


@pytest.fixture
def viewer(session):
    with TestClient(create_viewer_app(session)) as c:
        yield c
