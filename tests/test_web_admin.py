import zipfile
from io import BytesIO

import pytest

from maniuz.constants import SETTING_DEFAULT_PRICE_TYPE, SETTING_STORE_LOCATION, SETTING_TEST_MODE
from maniuz.db import sqlite as db

from conftest import ADMIN_EMAIL, register


@pytest.fixture()
def admin(client):
    register(client, email=ADMIN_EMAIL, name="Boss")
    return client


def test_anonymous_redirected_to_login(client):
    resp = client.get("/admin", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/login"


def test_customer_forbidden(client):
    register(client)
    assert client.get("/admin").status_code == 403


def test_dashboard(admin, cola):
    resp = admin.get("/admin")
    assert resp.status_code == 200
    assert "admin_total_products" in resp.text


class TestProducts:
    def test_create_with_tier_prices(self, admin, tiers):
        retail, wholesale = tiers
        resp = admin.post(
            "/admin/products/save",
            data={
                "name": "Fanta",
                "stock": "48",
                "items_per_box": "12",
                f"price_{retail}": "8,5",
                f"price_{wholesale}": "7",
                f"box_price_{wholesale}": "80",
            },
            follow_redirects=False,
        )
        assert resp.headers["location"] == "/admin/products?msg=success"
        product = db.list_products()[0]
        assert product["prices"] == {retail: 8.5, wholesale: 7.0}
        assert product["box_prices"] == {wholesale: 80.0}
        assert product["items_per_box"] == 12

    def test_invalid_stock(self, admin, tiers):
        resp = admin.post("/admin/products/save", data={"name": "Fanta", "stock": "-1"}, follow_redirects=False)
        assert resp.headers["location"] == "/admin/products/new?err=error"

    def test_bad_product_id(self, admin, cola):
        resp = admin.post(
            "/admin/products/save", data={"id": "x1", "name": "Fanta", "stock": "1"}, follow_redirects=False
        )
        assert resp.headers["location"] == "/admin/products?err=error"
        assert [p["name"] for p in db.list_products()] == ["Cola 330ml"]

    def test_edit_and_delete(self, admin, cola):
        assert admin.get(f"/admin/products/{cola}/edit").status_code == 200
        admin.post("/admin/products/save", data={"id": str(cola), "name": "Cola Zero", "stock": "10"})
        assert db.get_product(cola)["name"] == "Cola Zero"
        admin.post(f"/admin/products/{cola}/delete")
        assert db.get_product(cola) is None


class TestPriceTypes:
    def test_create_edit_delete(self, admin):
        admin.post("/admin/price-types/save", data={"name": "VIP", "description": "best"})
        pt = db.list_price_types()[0]
        admin.post("/admin/price-types/save", data={"id": str(pt["id"]), "name": "VIP+"})
        assert db.get_price_type(pt["id"])["name"] == "VIP+"

        db.set_setting(SETTING_DEFAULT_PRICE_TYPE, pt["id"])
        admin.post(f"/admin/price-types/{pt['id']}/delete")
        assert db.list_price_types() == []
        assert db.get_setting(SETTING_DEFAULT_PRICE_TYPE) is None


def test_customer_access(admin, tiers):
    customer_id = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
    resp = admin.post(
        f"/admin/customers/{customer_id}",
        data={"price_type_id": str(tiers[1]), "role": "customer"},
        follow_redirects=False,
    )
    assert resp.headers["location"] == "/admin/customers?msg=customer_updated_success"
    assert db.get_customer(customer_id)["price_type_id"] == tiers[1]
    assert admin.post("/admin/customers/999", data={"role": "customer"}).status_code == 404


def test_customer_access_bad_tier_id(admin, tiers):
    customer_id = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
    resp = admin.post(
        f"/admin/customers/{customer_id}",
        data={"price_type_id": "abc", "role": "customer"},
        follow_redirects=False,
    )
    assert resp.headers["location"] == "/admin/customers?err=error_updating_customer"
    assert db.get_customer(customer_id)["price_type_id"] == tiers[0]


class TestOrders:
    @pytest.fixture()
    def order_id(self, tiers, cola):
        cid = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
        ok, order = db.create_order(cid, "Ali", tiers[0], [{"product_id": cola, "quantity": 1}], "pickup")
        return order["id"]

    def test_list_filter_and_status(self, admin, order_id):
        assert "Ali" in admin.get("/admin/orders?status=pending").text
        resp = admin.post(f"/admin/orders/{order_id}/status", data={"status": "completed"}, follow_redirects=False)
        assert resp.headers["location"] == "/admin/orders?msg=success"
        assert db.get_order(order_id)["status"] == "completed"
        resp = admin.post(f"/admin/orders/{order_id}/status", data={"status": "lost"}, follow_redirects=False)
        assert resp.headers["location"] == "/admin/orders?err=order_error_status"

    def test_pdf(self, admin, order_id):
        resp = admin.get(f"/admin/orders/{order_id}/pdf")
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.content.startswith(b"%PDF")
        assert admin.get("/admin/orders/999/pdf").status_code == 404


def test_partnerships(admin):
    pid = db.add_partnership("Ali", "ali@example.com", "+998901234567", "resell")
    page = admin.get(f"/admin/partnerships?status=pending&selected={pid}")
    assert "resell" in page.text
    admin.post(f"/admin/partnerships/{pid}", data={"status": "approved", "notes": "signed"})
    app = db.get_partnership(pid)
    assert (app["status"], app["notes"]) == ("approved", "signed")

    resp = admin.post(f"/admin/partnerships/{pid}/delete", follow_redirects=False)
    assert resp.headers["location"] == "/admin/partnerships?msg=success"
    assert db.get_partnership(pid) is None
    resp = admin.post(f"/admin/partnerships/{pid}/delete", follow_redirects=False)
    assert resp.headers["location"] == "/admin/partnerships?err=partnership_not_found"


def test_messages(admin):
    mid = db.add_contact_message("Ali", "ali@example.com", "", "Hello")
    assert "Hello" in admin.get("/admin/messages").text
    admin.post(f"/admin/messages/{mid}/read")
    assert db.list_contact_messages()[0]["status"] == "read"


def test_translations(admin):
    admin.post("/admin/translations/save", data={"key": "greeting", "uz": "Salom", "tr": "Merhaba", "ru": "Привет"})
    assert db.list_translation_rows() == [{"key": "greeting", "uz": "Salom", "tr": "Merhaba", "ru": "Привет"}]
    assert "greeting" in admin.get("/admin/translations?q=merhaba").text
    admin.post("/admin/translations/delete", data={"key": "greeting"})
    assert db.list_translation_rows() == []


def test_settings(admin, tiers):
    resp = admin.post(
        "/admin/settings",
        data={"default_price_type_id": str(tiers[1]), "test_mode": "1", "store_lat": "41.5", "store_lng": "60.6"},
        follow_redirects=False,
    )
    assert resp.headers["location"] == "/admin/settings?msg=settings_saved"
    assert db.get_setting(SETTING_DEFAULT_PRICE_TYPE) == tiers[1]
    assert db.get_setting(SETTING_TEST_MODE) is True
    assert db.get_setting(SETTING_STORE_LOCATION) == {"lat": 41.5, "lng": 60.6}

    resp = admin.post("/admin/settings", data={"default_price_type_id": "999"}, follow_redirects=False)
    assert resp.headers["location"] == "/admin/settings?err=error"


def test_settings_without_price_types(admin):
    resp = admin.post(
        "/admin/settings",
        data={"test_mode": "on", "store_lat": "41.5", "store_lng": "60.6"},
        follow_redirects=False,
    )
    assert resp.headers["location"] == "/admin/settings?msg=settings_saved"
    assert db.get_setting(SETTING_TEST_MODE) is True
    assert db.get_setting(SETTING_STORE_LOCATION) == {"lat": 41.5, "lng": 60.6}
    assert db.get_setting(SETTING_DEFAULT_PRICE_TYPE) is None


def test_seed(admin):
    assert admin.post("/admin/seed/database", follow_redirects=False).headers["location"] == "/admin/seed?msg=success"
    assert len(db.list_price_types()) == 3
    assert len(db.list_products()) == 6
    resp = admin.post("/admin/seed/database", follow_redirects=False)
    assert resp.headers["location"] == "/admin/seed?err=seed_already_done"

    admin.post("/admin/seed/translations")
    assert db.get_translations("ru")["cart_title"] == "Корзина"
    assert admin.post("/admin/seed/unknown").status_code == 404


def test_backup_download(admin):
    resp = admin.get("/admin/backup")
    assert resp.headers["content-type"] == "application/zip"
    with zipfile.ZipFile(BytesIO(resp.content)) as z:
        assert any(name.startswith("db/") for name in z.namelist())
