from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../maniuz repo root
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


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    db_path: str
    export_dir: str
    backup_dir: str
    secret_key: str
    admin_email: str
    bot_token: str
    admin_tg_id: int
    yandex_maps_api_key: str
    currency: str
    decimals: int
    default_language: str
    https_only_cookies: bool
    invoice_font_path: str
    invoice_font_bold_path: str


settings = Settings(
    db_path=_get_path("DB_PATH", "DATABASE_PATH", default=str(ROOT_DIR / "data" / "maniuz.db")),
    export_dir=_get_path("EXPORT_DIR", default=str(ROOT_DIR / "exports")),
    backup_dir=_get_path("BACKUP_DIR", default=str(ROOT_DIR / "backups")),
    secret_key=_get_env("SECRET_KEY", "SESSION_SECRET", default="change-me") or "change-me",
    admin_email=(_get_env("ADMIN_EMAIL", default="admin@maniuz.com") or "admin@maniuz.com").lower(),
    bot_token=_get_env("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", default="") or "",
    admin_tg_id=_get_int("ADMIN_TG_ID", "ADMIN_ID", default=0) or 0,
    yandex_maps_api_key=_get_env("YANDEX_MAPS_API_KEY", default="") or "",
    currency=_get_env("CURRENCY", default="UZS") or "UZS",
    decimals=_get_int("DECIMALS", default=2),
    default_language=_get_env("DEFAULT_LANGUAGE", default="uz") or "uz",
    https_only_cookies=_get_bool("HTTPS_ONLY_COOKIES", default=False),
    invoice_font_path=_get_env("INVOICE_FONT_PATH", "INVOICE_FONT", default="") or "",
    invoice_font_bold_path=_get_env("INVOICE_FONT_BOLD_PATH", default="") or "",
)


def require_bot_settings() -> None:
    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN is empty. Set BOT_TOKEN in .env")
    if not settings.admin_tg_id:
        raise RuntimeError("ADMIN_TG_ID is empty. Set ADMIN_TG_ID (or ADMIN_ID) in .env")
