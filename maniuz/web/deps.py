from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from fastapi import Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from maniuz.constants import (
    LANGUAGE_COOKIE,
    LANGUAGES,
    ORDER_STATUSES,
    PARTNERSHIP_STATUSES,
    ROLE_ADMIN,
    SETTING_TEST_MODE,
)
from maniuz.db import sqlite as db
from maniuz.services.cart import Cart
from maniuz.services.i18n import Translator, normalize_language
from maniuz.utils.formatters import money

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = money


class LoginRequired(Exception):
    pass


def get_language(request: Request) -> str:
    return normalize_language(request.cookies.get(LANGUAGE_COOKIE))


def get_translator(request: Request) -> Translator:
    tr = getattr(request.state, "translator", None)
    if tr is None:
        tr = Translator(get_language(request))
        request.state.translator = tr
    return tr


def current_customer(request: Request) -> Optional[Dict[str, Any]]:
    if hasattr(request.state, "customer"):
        return request.state.customer
    customer = None
    customer_id = request.session.get("customer_id")
    if customer_id is not None:
        customer = db.get_customer(int(customer_id))
        if customer is None:
            # аккаунт удалён, а cookie осталась
            request.session.pop("customer_id", None)
    request.state.customer = customer
    return customer


def require_customer(request: Request) -> Dict[str, Any]:
    customer = current_customer(request)
    if customer is None:
        raise LoginRequired()
    return customer


def require_admin(customer: Dict[str, Any] = Depends(require_customer)) -> Dict[str, Any]:
    if customer.get("role") != ROLE_ADMIN:
        raise HTTPException(status_code=403, detail="admin_only_feature")
    return customer


def load_cart(request: Request) -> Cart:
    return Cart.from_dict(request.session.get("cart"))


def save_cart(request: Request, cart: Cart) -> None:
    request.session["cart"] = cart.to_dict()


def redirect(url: str, msg: Optional[str] = None, err: Optional[str] = None) -> RedirectResponse:
    params = {k: v for k, v in (("msg", msg), ("err", err)) if v}
    if params:
        url = f"{url}{'&' if '?' in url else '?'}{urlencode(params)}"
    return RedirectResponse(url=url, status_code=303)


def render(request: Request, name: str, ctx: Dict[str, Any], status_code: int = 200) -> HTMLResponse:
    tr = get_translator(request)
    base = {
        "t": tr.t,
        "lang": tr.lang,
        "languages": LANGUAGES,
        "customer": current_customer(request),
        "is_admin": (current_customer(request) or {}).get("role") == ROLE_ADMIN,
        "cart_count": load_cart(request).count,
        "test_mode": bool(db.get_setting(SETTING_TEST_MODE, False)),
        "order_statuses": ORDER_STATUSES,
        "partnership_statuses": PARTNERSHIP_STATUSES,
        "msg": request.query_params.get("msg", ""),
        "err": request.query_params.get("err", ""),
    }
    base.update(ctx)
    return templates.TemplateResponse(request, name, base, status_code=status_code)
