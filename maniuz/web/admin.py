from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse

from maniuz.constants import (
    DEFAULT_ITEMS_PER_BOX,
    DEFAULT_STORE_LAT,
    DEFAULT_STORE_LNG,
    LANGUAGES,
    ORDER_STATUSES,
    PARTNERSHIP_STATUSES,
    ROLES,
    SETTING_DEFAULT_PRICE_TYPE,
    SETTING_STORE_LOCATION,
    SETTING_TEST_MODE,
)
from maniuz.db import sqlite as db
from maniuz.services.auth import AuthError, change_customer_access
from maniuz.services.backup import make_backup
from maniuz.services.i18n import filter_rows, seed_translations
from maniuz.services.invoice_pdf import generate_order_pdf
from maniuz.services.seed import seed_database
from maniuz.web.deps import redirect, render, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


def _parse_float(raw: Any) -> Optional[float]:
    s = str(raw or "").strip().replace(",", ".")
    if not s:
        return None
    return float(s)


def _optional_int(raw: Any) -> Optional[int]:
    s = str(raw or "").strip()
    return int(s) if s else None


@router.get("", response_class=HTMLResponse)
def dashboard(request: Request):
    return render(request, "admin/dashboard.html", {"stats": db.get_stats()})


# ---------------- products ----------------

@router.get("/products", response_class=HTMLResponse)
def products(request: Request):
    return render(
        request,
        "admin/products.html",
        {"products": db.list_products(), "price_types": db.list_price_types()},
    )


@router.get("/products/new", response_class=HTMLResponse)
def product_new(request: Request):
    blank = {"id": None, "name": "", "description": "", "image_url": "", "stock": 0,
             "items_per_box": DEFAULT_ITEMS_PER_BOX, "prices": {}, "box_prices": {}}
    return render(request, "admin/product_form.html", {"product": blank, "price_types": db.list_price_types()})


@router.get("/products/{product_id}/edit", response_class=HTMLResponse)
def product_edit(request: Request, product_id: int):
    product = db.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="product_not_found")
    return render(request, "admin/product_form.html", {"product": product, "price_types": db.list_price_types()})


@router.post("/products/save")
async def product_save(request: Request):
    form = await request.form()
    try:
        product_id = _optional_int(form.get("id"))
    except ValueError:
        return redirect("/admin/products", err="error")
    prices: Dict[int, float] = {}
    box_prices: Dict[int, float] = {}
    try:
        for pt in db.list_price_types():
            unit = _parse_float(form.get(f"price_{pt['id']}"))
            box = _parse_float(form.get(f"box_price_{pt['id']}"))
            if unit is not None:
                prices[pt["id"]] = unit
            if box is not None:
                box_prices[pt["id"]] = box
        fields = dict(
            name=str(form.get("name") or ""),
            description=str(form.get("description") or ""),
            image_url=str(form.get("image_url") or "").strip(),
            stock=int(str(form.get("stock") or "0")),
            items_per_box=_optional_int(form.get("items_per_box")) or DEFAULT_ITEMS_PER_BOX,
            prices=prices,
            box_prices=box_prices,
        )
        if product_id is None:
            db.add_product(**fields)
        elif not db.update_product(product_id, **fields):
            return redirect("/admin/products", err="product_not_found")
    except ValueError as e:
        logger.info("product save rejected: %s", e)
        back = f"/admin/products/{product_id}/edit" if product_id else "/admin/products/new"
        return redirect(back, err="error")
    return redirect("/admin/products", msg="success")


@router.post("/products/{product_id}/delete")
def product_delete(product_id: int):
    if not db.delete_product(product_id):
        return redirect("/admin/products", err="product_not_found")
    return redirect("/admin/products", msg="success")


# ---------------- price types ----------------

@router.get("/price-types", response_class=HTMLResponse)
def price_types(request: Request, edit: Optional[int] = None):
    editing = db.get_price_type(edit) if edit else None
    return render(
        request,
        "admin/price_types.html",
        {"price_types": db.list_price_types(), "editing": editing},
    )


@router.post("/price-types/save")
def price_type_save(
    raw_id: str = Form("", alias="id"),
    name: str = Form(...),
    description: str = Form(""),
):
    try:
        pt_id = _optional_int(raw_id)
        if pt_id is None:
            db.add_price_type(name, description)
        elif not db.update_price_type(pt_id, name, description):
            return redirect("/admin/price-types", err="error")
    except ValueError:
        return redirect("/admin/price-types", err="error")
    return redirect("/admin/price-types", msg="success")


@router.post("/price-types/{price_type_id}/delete")
def price_type_delete(price_type_id: int):
    if not db.delete_price_type(price_type_id):
        return redirect("/admin/price-types", err="error")
    if db.get_setting(SETTING_DEFAULT_PRICE_TYPE) == price_type_id:
        db.set_setting(SETTING_DEFAULT_PRICE_TYPE, None)
    return redirect("/admin/price-types", msg="success")


# ---------------- customers ----------------

@router.get("/customers", response_class=HTMLResponse)
def customers(request: Request, edit: Optional[int] = None):
    price_types = db.list_price_types()
    return render(
        request,
        "admin/customers.html",
        {
            "customers": db.list_customers(),
            "price_types": price_types,
            "price_type_names": {pt["id"]: pt["name"] for pt in price_types},
            "editing": db.get_customer(edit) if edit else None,
            "roles": ROLES,
        },
    )


@router.post("/customers/{customer_id}")
def customer_update(
    customer_id: int,
    price_type_id: str = Form(""),
    role: str = Form(...),
    actor: Dict[str, Any] = Depends(require_admin),
):
    if db.get_customer(customer_id) is None:
        raise HTTPException(status_code=404, detail="customer_not_found")
    try:
        change_customer_access(actor, customer_id, _optional_int(price_type_id), role)
    except AuthError as e:
        return redirect("/admin/customers", err=e.code)
    except ValueError:
        return redirect("/admin/customers", err="error_updating_customer")
    return redirect("/admin/customers", msg="customer_updated_success")


# ---------------- orders ----------------

@router.get("/orders", response_class=HTMLResponse)
def orders(request: Request, status: str = ""):
    if status and status not in ORDER_STATUSES:
        status = ""
    return render(request, "admin/orders.html", {"orders": db.list_orders(status or None), "status": status})


@router.post("/orders/{order_id}/status")
def order_status(order_id: int, status: str = Form(...)):
    ok, err = db.update_order_status(order_id, status)
    if not ok:
        return redirect("/admin/orders", err=err)
    return redirect("/admin/orders", msg="success")


@router.get("/orders/{order_id}/pdf")
def order_pdf(order_id: int):
    if db.get_order(order_id) is None:
        raise HTTPException(status_code=404, detail="order_not_found")
    path = generate_order_pdf(order_id)
    return FileResponse(path, filename=f"order_{order_id}.pdf", media_type="application/pdf")


# ---------------- partnerships ----------------

@router.get("/partnerships", response_class=HTMLResponse)
def partnerships(request: Request, status: str = "all", selected: Optional[int] = None):
    if status not in PARTNERSHIP_STATUSES:
        status = "all"
    return render(
        request,
        "admin/partnerships.html",
        {
            "applications": db.list_partnerships(None if status == "all" else status),
            "counts": db.partnership_counts(),
            "status": status,
            "selected": db.get_partnership(selected) if selected else None,
        },
    )


@router.post("/partnerships/{partnership_id}")
def partnership_update(
    partnership_id: int,
    status: str = Form(""),
    notes: Optional[str] = Form(None),
):
    ok, err = db.update_partnership(partnership_id, status=status or None, notes=notes)
    if not ok:
        return redirect("/admin/partnerships", err=err)
    return redirect(f"/admin/partnerships?selected={partnership_id}", msg="success")


@router.post("/partnerships/{partnership_id}/delete")
def partnership_delete(partnership_id: int):
    if not db.delete_partnership(partnership_id):
        return redirect("/admin/partnerships", err="partnership_not_found")
    return redirect("/admin/partnerships", msg="success")


# ---------------- contact messages ----------------

@router.get("/messages", response_class=HTMLResponse)
def messages(request: Request):
    return render(request, "admin/messages.html", {"messages": db.list_contact_messages()})


@router.post("/messages/{message_id}/read")
def message_read(message_id: int):
    db.mark_contact_message_read(message_id)
    return redirect("/admin/messages")


# ---------------- translations ----------------

@router.get("/translations", response_class=HTMLResponse)
def translations(request: Request, q: str = ""):
    rows = db.list_translation_rows()
    return render(
        request,
        "admin/translations.html",
        {"rows": filter_rows(rows, q), "total": len(rows), "q": q, "langs": list(LANGUAGES)},
    )


@router.post("/translations/save")
async def translation_save(request: Request):
    form = await request.form()
    key = str(form.get("key") or "").strip()
    if not key:
        return redirect("/admin/translations", err="error")
    db.save_translation(key, {lang: str(form.get(lang) or "") for lang in LANGUAGES})
    return redirect("/admin/translations", msg="success")


@router.post("/translations/delete")
def translation_delete(key: str = Form(...)):
    db.delete_translation(key)
    return redirect("/admin/translations", msg="success")


# ---------------- settings ----------------

@router.get("/settings", response_class=HTMLResponse)
def settings_get(request: Request):
    price_types = db.list_price_types()
    default_id = db.get_setting(SETTING_DEFAULT_PRICE_TYPE)
    if default_id is None and price_types:
        default_id = price_types[0]["id"]
    location = db.get_setting(SETTING_STORE_LOCATION) or {"lat": DEFAULT_STORE_LAT, "lng": DEFAULT_STORE_LNG}
    return render(
        request,
        "admin/settings.html",
        {
            "price_types": price_types,
            "default_price_type_id": default_id,
            "test_mode_on": bool(db.get_setting(SETTING_TEST_MODE, False)),
            "location": location,
        },
    )


@router.post("/settings")
def settings_post(
    default_price_type_id: str = Form(""),
    test_mode: str = Form(""),
    store_lat: str = Form(""),
    store_lng: str = Form(""),
):
    try:
        pt_id = _optional_int(default_price_type_id)
        lat = _parse_float(store_lat)
        lng = _parse_float(store_lng)
    except ValueError:
        return redirect("/admin/settings", err="error")
    # тип цен проверяем, только если он передан
    if pt_id is not None and db.get_price_type(pt_id) is None:
        return redirect("/admin/settings", err="error")

    if pt_id is not None:
        db.set_setting(SETTING_DEFAULT_PRICE_TYPE, pt_id)
    db.set_setting(SETTING_TEST_MODE, test_mode in ("1", "on", "true"))
    if lat is not None and lng is not None:
        db.set_setting(SETTING_STORE_LOCATION, {"lat": lat, "lng": lng})
    return redirect("/admin/settings", msg="settings_saved")


# ---------------- seed / backup ----------------

@router.get("/seed", response_class=HTMLResponse)
def seed_get(request: Request):
    return render(request, "admin/seed.html", {})


@router.post("/seed/{action}")
def seed_post(action: str):
    if action == "database":
        ok, _ = seed_database()
        return redirect("/admin/seed", msg="success") if ok else redirect("/admin/seed", err="seed_already_done")
    if action == "translations":
        seed_translations(overwrite=False)
        return redirect("/admin/seed", msg="success")
    if action == "items-per-box":
        db.set_missing_items_per_box(DEFAULT_ITEMS_PER_BOX)
        return redirect("/admin/seed", msg="success")
    raise HTTPException(status_code=404, detail="unknown seed action")


@router.get("/backup")
def backup():
    path = make_backup()
    return FileResponse(path, filename=os.path.basename(path), media_type="application/zip")
