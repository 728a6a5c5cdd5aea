from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from fastapi import BackgroundTasks, Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from maniuz.config import settings
from maniuz.constants import (
    DEFAULT_STORE_LAT,
    DEFAULT_STORE_LNG,
    DELIVERY_DELIVERY,
    LANGUAGE_COOKIE,
    LANGUAGES,
    SETTING_STORE_LOCATION,
    UNIT_PIECE,
    UNITS,
)
from maniuz.db import sqlite as db
from maniuz.services import notify, pricing
from maniuz.services.auth import AuthError, check_nickname, customer_price_type_id, sign_in, sign_up
from maniuz.services.geocoding import reverse_geocode
from maniuz.web.admin import router as admin_router
from maniuz.web.deps import (
    STATIC_DIR,
    LoginRequired,
    current_customer,
    get_language,
    load_cart,
    redirect,
    render,
    require_customer,
    save_cart,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Maniuz")
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie="maniuz_session",
    https_only=settings.https_only_cookies,
)

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(admin_router)


@app.on_event("startup")
def _startup() -> None:
    db.init_db()


@app.exception_handler(LoginRequired)
async def _login_required(request: Request, exc: LoginRequired):
    return RedirectResponse(url="/login", status_code=303)


def _with_prices(products: list[Dict[str, Any]], price_type_id: Optional[int]) -> list[Dict[str, Any]]:
    for p in products:
        p["unit_price"] = pricing.unit_price(p, price_type_id)
        p["box_price"] = pricing.box_price(p, price_type_id)
        p["per_box"] = pricing.items_per_box(p)
    return products


def _store_location() -> Dict[str, float]:
    loc = db.get_setting(SETTING_STORE_LOCATION) or {}
    return {"lat": float(loc.get("lat", DEFAULT_STORE_LAT)), "lng": float(loc.get("lng", DEFAULT_STORE_LNG))}


# ---------------- catalog ----------------

@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    customer = current_customer(request)
    price_type_id = customer_price_type_id(customer) if customer else None
    products = _with_prices(db.list_products(), price_type_id)
    return render(request, "index.html", {"products": products, "show_prices": customer is not None})


@app.get("/product/{product_id}", response_class=HTMLResponse)
def product_detail(request: Request, product_id: int):
    product = db.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="product_not_found")
    customer = current_customer(request)
    price_type_id = customer_price_type_id(customer) if customer else None
    _with_prices([product], price_type_id)
    return render(request, "product.html", {"product": product, "show_prices": customer is not None})


# ---------------- cart ----------------

def _pieces_in_cart(cart, product: Dict[str, Any]) -> int:
    per_box = pricing.items_per_box(product)
    return sum(pricing.pieces(it.quantity, it.unit, per_box) for it in cart.items if it.product_id == product["id"])


@app.get("/cart", response_class=HTMLResponse)
def cart_view(request: Request, customer: Dict[str, Any] = Depends(require_customer)):
    cart = load_cart(request)
    products = db.get_products(it.product_id for it in cart.items)
    price_type_id = customer_price_type_id(customer)
    lines = cart.priced_lines(products, price_type_id)
    return render(
        request,
        "cart.html",
        {
            "cart": cart,
            "lines": lines,
            "total": cart.total_amount(products, price_type_id),
            "store_location": _store_location(),
        },
    )


@app.post("/cart/add")
def cart_add(
    request: Request,
    product_id: int = Form(...),
    quantity: int = Form(1),
    unit: str = Form(UNIT_PIECE),
    customer: Dict[str, Any] = Depends(require_customer),
):
    product = db.get_product(product_id)
    if product is None:
        return redirect("/", err="product_not_found")
    if unit not in UNITS:
        unit = UNIT_PIECE
    quantity = max(1, quantity)

    cart = load_cart(request)
    wanted = _pieces_in_cart(cart, product) + pricing.pieces(quantity, unit, pricing.items_per_box(product))
    if wanted > int(product["stock"]):
        return redirect(f"/product/{product_id}", err="order_error_stock")

    cart.add_item(product_id, quantity, unit)
    save_cart(request, cart)
    return redirect("/cart", msg="cart_item_added")


@app.post("/cart/update")
def cart_update(
    request: Request,
    product_id: int = Form(...),
    quantity: int = Form(...),
    unit: str = Form(UNIT_PIECE),
    customer: Dict[str, Any] = Depends(require_customer),
):
    cart = load_cart(request)
    product = db.get_product(product_id)
    if product is not None and quantity > 0:
        others = sum(
            pricing.pieces(it.quantity, it.unit, pricing.items_per_box(product))
            for it in cart.items
            if it.product_id == product_id and it.unit != unit
        )
        if others + pricing.pieces(quantity, unit, pricing.items_per_box(product)) > int(product["stock"]):
            return redirect("/cart", err="order_error_stock")
    cart.update_quantity(product_id, quantity, unit)
    save_cart(request, cart)
    return redirect("/cart")


@app.post("/cart/remove")
def cart_remove(
    request: Request,
    product_id: int = Form(...),
    unit: Optional[str] = Form(None),
    customer: Dict[str, Any] = Depends(require_customer),
):
    cart = load_cart(request)
    cart.remove_item(product_id, unit or None)
    save_cart(request, cart)
    return redirect("/cart")


@app.post("/cart/delivery")
def cart_delivery(
    request: Request,
    delivery_type: str = Form(...),
    customer: Dict[str, Any] = Depends(require_customer),
):
    cart = load_cart(request)
    try:
        cart.set_delivery_type(delivery_type)
    except ValueError:
        return redirect("/cart", err="order_error_delivery_type")
    save_cart(request, cart)
    return redirect("/cart")


@app.post("/cart/checkout")
def cart_checkout(
    request: Request,
    background_tasks: BackgroundTasks,
    delivery_type: Optional[str] = Form(None),
    delivery_address: str = Form(""),
    latitude: Optional[float] = Form(None),
    longitude: Optional[float] = Form(None),
    customer: Dict[str, Any] = Depends(require_customer),
):
    cart = load_cart(request)
    if cart.is_empty():
        return redirect("/cart", err="cart_empty")
    if delivery_type:
        try:
            cart.set_delivery_type(delivery_type)
        except ValueError:
            return redirect("/cart", err="order_error_delivery_type")

    is_delivery = cart.delivery_type == DELIVERY_DELIVERY
    ok, result = db.create_order(
        customer_id=customer["id"],
        customer_name=customer["name"],
        price_type_id=customer_price_type_id(customer),
        lines=cart.order_lines(),
        delivery_type=cart.delivery_type,
        delivery_address=(delivery_address.strip() or None) if is_delivery else None,
        latitude=latitude if is_delivery else None,
        longitude=longitude if is_delivery else None,
    )
    if not ok:
        save_cart(request, cart)
        return redirect("/cart", err=result)

    cart.clear()
    save_cart(request, cart)
    background_tasks.add_task(notify.notify_admin, notify.order_text(result))
    return redirect("/orders", msg="order_created")


# ---------------- account ----------------

@app.get("/orders", response_class=HTMLResponse)
def orders(request: Request, customer: Dict[str, Any] = Depends(require_customer)):
    return render(request, "orders.html", {"orders": db.list_customer_orders(customer["id"])})


@app.get("/profile", response_class=HTMLResponse)
def profile(request: Request, customer: Dict[str, Any] = Depends(require_customer)):
    price_type = None
    pt_id = customer_price_type_id(customer)
    if pt_id is not None:
        price_type = db.get_price_type(pt_id)
    return render(request, "profile.html", {"price_type": price_type})


@app.get("/login", response_class=HTMLResponse)
def login_get(request: Request):
    return render(request, "login.html", {"email": ""})


@app.post("/login")
def login_post(request: Request, email: str = Form(...), password: str = Form(...)):
    try:
        customer = sign_in(email, password)
    except AuthError as e:
        return render(request, "login.html", {"email": email, "error": e.code}, status_code=400)
    request.session["customer_id"] = customer["id"]
    return redirect("/")


@app.get("/register", response_class=HTMLResponse)
def register_get(request: Request):
    return render(request, "register.html", {"form": {}})


@app.post("/register")
def register_post(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    confirm_password: str = Form(...),
    nickname: str = Form(""),
    phone: str = Form(""),
):
    try:
        customer = sign_up(email, password, confirm_password, name, nickname=nickname, phone=phone)
    except AuthError as e:
        form = {"name": name, "email": email, "nickname": nickname, "phone": phone}
        return render(request, "register.html", {"form": form, "error": e.code}, status_code=400)
    request.session["customer_id"] = customer["id"]
    return redirect("/")


@app.post("/logout")
def logout(request: Request):
    request.session.pop("customer_id", None)
    return redirect("/")


def _same_site_path(referer: Optional[str], host: str) -> str:
    """Path of a same-origin Referer, or "/" for anything else."""
    if not referer:
        return "/"
    parts = urlsplit(referer)
    if parts.scheme or parts.netloc:
        if parts.scheme not in ("http", "https") or parts.netloc != host:
            return "/"
    path = parts.path or "/"
    if not path.startswith("/") or path.startswith("//") or path.startswith("/\\"):
        return "/"
    return f"{path}?{parts.query}" if parts.query else path


@app.get("/language/{lang}")
def set_language(request: Request, lang: str):
    if lang not in LANGUAGES:
        raise HTTPException(status_code=404, detail="unknown language")
    back = _same_site_path(request.headers.get("referer"), request.url.netloc)
    resp = RedirectResponse(url=back, status_code=303)
    resp.set_cookie(LANGUAGE_COOKIE, lang, max_age=365 * 24 * 3600, samesite="lax")
    return resp


# ---------------- lead forms ----------------

@app.get("/partnership", response_class=HTMLResponse)
def partnership_get(request: Request):
    return render(request, "partnership.html", {})


@app.post("/partnership")
def partnership_post(
    request: Request,
    background_tasks: BackgroundTasks,
    name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(...),
    message: str = Form(""),
):
    app_id = db.add_partnership(name, email, phone, message)
    background_tasks.add_task(notify.notify_admin, notify.partnership_text(db.get_partnership(app_id)))
    return redirect("/partnership", msg="partnership_success")


@app.get("/contact", response_class=HTMLResponse)
def contact_get(request: Request):
    return render(request, "contact.html", {})


@app.post("/contact")
def contact_post(
    request: Request,
    background_tasks: BackgroundTasks,
    name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(""),
    message: str = Form(...),
):
    db.add_contact_message(name, email, phone, message)
    background_tasks.add_task(notify.notify_admin, notify.contact_text(name, phone, message))
    return redirect("/contact", msg="contact_success")


@app.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return render(request, "about.html", {})


@app.get("/terms", response_class=HTMLResponse)
def terms(request: Request):
    return render(request, "terms.html", {})


# ---------------- json ----------------

@app.get("/api/nickname-check")
def api_nickname_check(nickname: str = ""):
    return JSONResponse(check_nickname(nickname))


@app.get("/api/geocode")
async def api_geocode(request: Request, lat: float, lng: float):
    address = await reverse_geocode(lat, lng, get_language(request))
    return JSONResponse({"lat": lat, "lng": lng, "address": address})


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    uvicorn.run("maniuz.web.main:app", host="0.0.0.0", port=8000)
