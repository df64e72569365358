from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from albumshop.config import settings
from albumshop.constants import LOCALE_NAMES
from albumshop.db.local_storage import LocalStorage
from albumshop.services.api_client import AlbumApiClient
from albumshop.services.cart import CartStore
from albumshop.utils.formatters import money
from albumshop.viewer.i18n import Translator, UnknownLocaleError
from albumshop.viewer.session import BrowserSession

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = money


def build_session() -> BrowserSession:
    return BrowserSession(
        cart=CartStore(LocalStorage(settings.storage_path)),
        api=AlbumApiClient(settings.api_base_url, timeout=settings.api_timeout),
        translator=Translator(default_locale=settings.default_locale),
    )


def get_session(request: Request) -> BrowserSession:
    # default session is built on the first request, not at import
    if request.app.state.session is None:
        request.app.state.session = build_session()
    return request.app.state.session


def _render(request: Request, session: BrowserSession, status_code: int = 200, **ctx: Any) -> HTMLResponse:
    base = {
        "t": session.t,
        "locale": session.locale,
        "locales": [(code, LOCALE_NAMES.get(code, code)) for code in session.translator.available_locales],
        "albums": session.albums,
        "load_error": session.load_error,
        "cart": session.cart,
        "message": "",
    }
    base.update(ctx)
    return templates.TemplateResponse(request, "index.html", base, status_code=status_code)


def _back() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def create_app(session: Optional[BrowserSession] = None) -> FastAPI:
    app = FastAPI(title="Album Browser")
    app.state.session = session

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # ---------------- page ----------------

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, session: BrowserSession = Depends(get_session)):
        session.ensure_albums()
        return _render(request, session)

    @app.post("/albums/refresh")
    def albums_refresh(session: BrowserSession = Depends(get_session)):
        session.refresh_albums()
        return _back()

    # ---------------- cart ----------------

    @app.get("/cart")
    def cart_snapshot(session: BrowserSession = Depends(get_session)):
        cart = session.cart
        return JSONResponse(
            {
                "items": [a.to_dict() for a in cart.items],
                "item_count": cart.item_count,
                "total_price": cart.total_price,
                "is_open": cart.is_open,
            }
        )

    @app.post("/cart/add/{album_id}", response_class=HTMLResponse)
    def cart_add(album_id: int, request: Request, session: BrowserSession = Depends(get_session)):
        session.ensure_albums()
        album = session.find_album(album_id)
        if album is None:
            logger.warning("add to cart: album %s is not in the fetched list", album_id)
            return _render(request, session, status_code=404, message=session.t("error.notFound"))
        session.cart.add_to_cart(album)
        return _back()

    @app.post("/cart/remove/{album_id}")
    def cart_remove(album_id: int, session: BrowserSession = Depends(get_session)):
        session.cart.remove_from_cart(album_id)
        return _back()

    @app.post("/cart/clear")
    def cart_clear(session: BrowserSession = Depends(get_session)):
        session.cart.clear_cart()
        return _back()

    @app.post("/cart/toggle")
    def cart_toggle(session: BrowserSession = Depends(get_session)):
        session.cart.toggle_cart()
        return _back()

    @app.post("/cart/open")
    def cart_open(session: BrowserSession = Depends(get_session)):
        session.cart.open_cart()
        return _back()

    @app.post("/cart/close")
    def cart_close(session: BrowserSession = Depends(get_session)):
        session.cart.close_cart()
        return _back()

    # ---------------- language ----------------

    @app.post("/language", response_class=HTMLResponse)
    def language(request: Request, locale: str = Form(...), session: BrowserSession = Depends(get_session)):
        try:
            session.set_locale(locale)
        except UnknownLocaleError as e:
            logger.warning("%s", e)
            return _render(request, session, status_code=400, message=str(e))
        return _back()

    return app


app = create_app()
