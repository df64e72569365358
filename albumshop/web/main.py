from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from albumshop.config import settings
from albumshop.constants import WELCOME_TEXT
from albumshop.db.albums import AlbumNotFoundError, AlbumStore, AlbumValidationError
from albumshop.web.schemas import AlbumCreate, AlbumOut, AlbumUpdate, ErrorOut

logger = logging.getLogger(__name__)

ROUTES = (
    ("GET", "/albums", "List all albums"),
    ("GET", "/albums/{id}", "Get album by ID"),
    ("POST", "/albums", "Create new album"),
    ("PUT", "/albums/{id}", "Update album"),
    ("DELETE", "/albums/{id}", "Delete album"),
)


def get_store(request: Request) -> AlbumStore:
    return request.app.state.store


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(store: Optional[AlbumStore] = None) -> FastAPI:
    app = FastAPI(title="Album API")
    app.state.store = store if store is not None else AlbumStore(id_policy=settings.id_policy)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------- errors ----------------

    @app.exception_handler(AlbumNotFoundError)
    async def _not_found(request: Request, exc: AlbumNotFoundError):
        logger.warning("%s %s -> 404 (id=%s)", request.method, request.url.path, exc.album_id)
        return _error(404, str(exc))

    @app.exception_handler(AlbumValidationError)
    async def _invalid(request: Request, exc: AlbumValidationError):
        logger.warning("%s %s -> 400 (%s)", request.method, request.url.path, exc)
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        message = "Invalid request: " + "; ".join(parts)
        logger.warning("%s %s -> 400 (%s)", request.method, request.url.path, message)
        return _error(400, message)

    # ---------------- routes ----------------

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return WELCOME_TEXT

    @app.get("/albums", response_model=List[AlbumOut])
    def list_albums(store: AlbumStore = Depends(get_store)):
        return [a.to_dict() for a in store.list()]

    @app.get("/albums/{album_id}", response_model=AlbumOut, responses={404: {"model": ErrorOut}})
    def get_album(album_id: int, store: AlbumStore = Depends(get_store)):
        return store.get(album_id).to_dict()

    @app.post(
        "/albums",
        status_code=201,
        response_model=AlbumOut,
        responses={400: {"model": ErrorOut}},
    )
    def create_album(body: Optional[AlbumCreate] = None, store: AlbumStore = Depends(get_store)):
        body = body or AlbumCreate()
        album = store.create(body.title, body.artist, body.price, body.image_url)
        return album.to_dict()

    @app.put(
        "/albums/{album_id}",
        response_model=AlbumOut,
        responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
    )
    def update_album(
        album_id: int,
        body: Optional[AlbumUpdate] = None,
        store: AlbumStore = Depends(get_store),
    ):
        changes = body.changes() if body is not None else {}
        return store.update(album_id, changes).to_dict()

    @app.delete("/albums/{album_id}", response_model=AlbumOut, responses={404: {"model": ErrorOut}})
    def delete_album(album_id: int, store: AlbumStore = Depends(get_store)):
        return store.delete(album_id).to_dict()

    return app


app = create_app()
