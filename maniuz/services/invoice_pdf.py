from __future__ import annotations

import logging
import os
from typing import Any, Dict, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from maniuz.config import settings
from maniuz.constants import UNIT_BOX
from maniuz.db.sqlite import get_order

logger = logging.getLogger(__name__)

LEFT, RIGHT = 40, 550
COL_QTY, COL_PRICE = 340, 430
BOTTOM = 80

# встроенная Helvetica не умеет кириллицу и Ş, поэтому TTF из настроек
FONT, FONT_BOLD = "Helvetica", "Helvetica-Bold"


def _register(path: str) -> str:
    name = "Invoice-" + os.path.splitext(os.path.basename(path))[0]
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, path))
    return name


def invoice_fonts() -> Tuple[str, str]:
    """(regular, bold) font names; built-in Helvetica when no TTF is configured."""
    if not settings.invoice_font_path:
        return FONT, FONT_BOLD
    try:
        regular = _register(settings.invoice_font_path)
        bold = _register(settings.invoice_font_bold_path) if settings.invoice_font_bold_path else regular
    except (OSError, TTFError) as e:
        logger.warning("invoice font %s not loaded, using Helvetica: %s", settings.invoice_font_path, e)
        return FONT, FONT_BOLD
    return regular, bold


def _amount(v: Any) -> str:
    return f"{float(v):.{settings.decimals}f}"


def _table_header(c: canvas.Canvas, fonts: Tuple[str, str], y: float) -> float:
    c.setFont(fonts[1], 10)
    c.drawString(LEFT, y, "Item")
    c.drawRightString(COL_QTY, y, "Qty")
    c.drawRightString(COL_PRICE, y, "Price")
    c.drawRightString(RIGHT, y, "Total")
    y -= 10
    c.line(LEFT, y, RIGHT, y)
    c.setFont(fonts[0], 10)
    return y - 16


def _order_header(c: canvas.Canvas, fonts: Tuple[str, str], order: Dict[str, Any], y: float) -> float:
    c.setFont(fonts[1], 14)
    c.drawString(LEFT, y, f"Maniuz · ORDER #{order['id']}")
    y -= 22

    c.setFont(fonts[0], 11)
    rows = [
        f"Customer: {order['customer_name']}",
        f"Date: {order['created_at']}",
        f"Status: {order['status']}",
        f"Delivery: {order['delivery_type']}",
    ]
    if order.get("delivery_address"):
        rows.append(f"Address: {order['delivery_address'][:80]}")
    if order.get("latitude") is not None and order.get("longitude") is not None:
        rows.append(f"Location: {order['latitude']}, {order['longitude']}")
    for row in rows:
        c.drawString(LEFT, y, row)
        y -= 16
    return y - 8


def generate_order_pdf(order_id: int) -> str:
    order = get_order(order_id)
    if order is None:
        raise ValueError(f"order #{order_id} not found")

    os.makedirs(settings.export_dir, exist_ok=True)
    path = os.path.join(settings.export_dir, f"order_{order_id}.pdf")

    c = canvas.Canvas(path, pagesize=A4)
    _, h = A4
    fonts = invoice_fonts()

    y = _order_header(c, fonts, order, h - 50)
    y = _table_header(c, fonts, y)

    for it in order["items"]:
        qty = f"{it['quantity']} {it['unit']}"
        if it["unit"] == UNIT_BOX:
            qty += f" ({it['items_per_box']} pcs)"
        c.drawString(LEFT, y, it["product_name"][:40])
        c.drawRightString(COL_QTY, y, qty)
        c.drawRightString(COL_PRICE, y, _amount(it["price"]))
        c.drawRightString(RIGHT, y, _amount(it["line_total"]))
        y -= 14
        if y < BOTTOM:
            # новая страница: шапка таблицы повторяется
            c.showPage()
            y = _table_header(c, fonts, h - 50)

    y -= 10
    c.line(LEFT, y, RIGHT, y)
    y -= 18
    c.setFont(fonts[1], 12)
    c.drawRightString(RIGHT, y, f"TOTAL: {_amount(order['total_amount'])} {settings.currency}")

    c.save()
    return path
