import dataclasses
import os
import zipfile

import pytest
import reportlab
from reportlab.pdfbase import pdfmetrics

from maniuz.config import settings
from maniuz.db import sqlite as db
from maniuz.services import invoice_pdf
from maniuz.services.backup import make_backup
from maniuz.services.invoice_pdf import generate_order_pdf

VERA = os.path.join(os.path.dirname(reportlab.__file__), "fonts", "Vera.ttf")


@pytest.fixture()
def order_id(tiers, cola):
    cid = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
    ok, order = db.create_order(
        cid, "Ali", tiers[0], [{"product_id": cola, "quantity": 1, "unit": "box"}], "delivery",
        delivery_address="Urgench",
    )
    assert ok
    return order["id"]


def test_order_pdf(order_id):
    path = generate_order_pdf(order_id)
    assert os.path.dirname(path) == settings.export_dir
    with open(path, "rb") as f:
        assert f.read(4) == b"%PDF"


def test_order_pdf_missing_order():
    with pytest.raises(ValueError):
        generate_order_pdf(999)


def test_backup_contains_db_and_pdfs(order_id):
    generate_order_pdf(order_id)
    path = make_backup()
    with zipfile.ZipFile(path) as z:
        names = z.namelist()
    assert f"db/{os.path.basename(settings.db_path)}" in names
    assert f"orders/order_{order_id}.pdf" in names
    assert not [n for n in os.listdir(settings.backup_dir) if n.startswith(".snapshot")]


def _use_font(monkeypatch, path):
    monkeypatch.setattr(invoice_pdf, "settings", dataclasses.replace(invoice_pdf.settings, invoice_font_path=path))


def test_helvetica_without_font_setting():
    assert invoice_pdf.invoice_fonts() == ("Helvetica", "Helvetica-Bold")


@pytest.mark.skipif(not os.path.exists(VERA), reason="reportlab ships without Vera.ttf")
def test_configured_ttf_font(monkeypatch, tiers):
    _use_font(monkeypatch, VERA)
    assert invoice_pdf.invoice_fonts() == ("Invoice-Vera", "Invoice-Vera")
    assert "Invoice-Vera" in pdfmetrics.getRegisteredFontNames()

    pid = db.add_product(name="Ice Tea Şeftali", stock=10, prices={tiers[0]: 9.0})
    cid = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
    ok, order = db.create_order(cid, "Ali", tiers[0], [{"product_id": pid, "quantity": 2}], "pickup")
    assert ok
    with open(generate_order_pdf(order["id"]), "rb") as f:
        assert f.read(4) == b"%PDF"


def test_missing_ttf_falls_back(monkeypatch):
    _use_font(monkeypatch, "/nonexistent/DejaVuSans.ttf")
    assert invoice_pdf.invoice_fonts() == ("Helvetica", "Helvetica-Bold")
