from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from albumshop.constants import ID_POLICIES, LOCALES

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../album-shop
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


def _get_list(*keys: str, default: str) -> Tuple[str, ...]:
    v = _get_env(*keys, default=default) or default
    return tuple(p.strip() for p in v.split(",") if p.strip())


@dataclass(frozen=True)
class Settings:
    api_host: str
    api_port: int
    viewer_host: str
    viewer_port: int
    api_base_url: str
    api_timeout: float
    storage_path: str
    default_locale: str
    id_policy: str
    cors_origins: Tuple[str, ...]
    log_level: str
    currency: str
    decimals: int


settings = Settings(
    api_host=_get_env("API_HOST", default="127.0.0.1") or "127.0.0.1",
    api_port=_get_int("API_PORT", "PORT", default=3000) or 3000,
    viewer_host=_get_env("VIEWER_HOST", default="127.0.0.1") or "127.0.0.1",
    viewer_port=_get_int("VIEWER_PORT", default=5173) or 5173,
    api_base_url=(_get_env("ALBUM_API_URL", "VITE_API_URL", default="http://localhost:3000") or "").rstrip("/"),
    api_timeout=_get_float("ALBUM_API_TIMEOUT", default=5.0),
    storage_path=_get_env(
        "LOCAL_STORAGE_PATH", default=str(ROOT_DIR / "data" / "local_storage.json")
    ) or "",
    default_locale=(_get_env("DEFAULT_LOCALE", default="en") or "en").lower(),
    id_policy=(_get_env("ALBUM_ID_POLICY", default="max_plus_one") or "max_plus_one").lower(),
    cors_origins=_get_list("CORS_ORIGINS", default="*"),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    currency=_get_env("CURRENCY", default="USD") or "USD",
    decimals=_get_int("DECIMALS", default=2),
)

if settings.id_policy not in ID_POLICIES:
    raise RuntimeError(
        f"ALBUM_ID_POLICY={settings.id_policy!r} is not supported. Use one of: {', '.join(ID_POLICIES)}"
    )
if settings.default_locale not in LOCALES:
    raise RuntimeError(
        f"DEFAULT_LOCALE={settings.default_locale!r} is not supported. Use one of: {', '.join(LOCALES)}"
    )
