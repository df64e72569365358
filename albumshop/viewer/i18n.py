from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from albumshop.constants import LOCALES

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


class UnknownLocaleError(ValueError):
    pass


def load_messages(locales_dir: Path = LOCALES_DIR) -> Dict[str, Dict[str, Any]]:
    messages = {}
    for code in LOCALES:
        with open(locales_dir / f"{code}.json", "r", encoding="utf-8") as f:
            messages[code] = json.load(f)
    return messages


def flatten_keys(table: Dict[str, Any], prefix: str = "") -> List[str]:
    keys = []
    for k, v in table.items():
        full = f"{prefix}{k}"
        if isinstance(v, dict):
            keys.extend(flatten_keys(v, full + "."))
        else:
            keys.append(full)
    return sorted(keys)


def _lookup(table: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


class Translator:
    """Static UI strings; album and cart data never pass through here."""

    def __init__(
        self,
        messages: Optional[Dict[str, Dict[str, Any]]] = None,
        default_locale: str = "en",
        fallback_locale: str = "en",
    ):
        self.messages = messages if messages is not None else load_messages()
        self.fallback_locale = fallback_locale
        self.default_locale = self.ensure_locale(default_locale)

    @property
    def available_locales(self) -> List[str]:
        return sorted(self.messages)

    def ensure_locale(self, locale: str) -> str:
        code = (locale or "").strip().lower()
        if code not in self.messages:
            raise UnknownLocaleError(f"unsupported locale: {locale!r}")
        return code

    def t(self, key: str, locale: Optional[str] = None) -> str:
        code = locale or self.default_locale
        value = _lookup(self.messages.get(code, {}), key)
        if value is None and code != self.fallback_locale:
            value = _lookup(self.messages.get(self.fallback_locale, {}), key)
        if value is None:
            logger.warning("missing translation %s (%s)", key, code)
            return key
        return value
