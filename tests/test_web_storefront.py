import pytest

from maniuz.constants import LANGUAGE_COOKIE, SETTING_TEST_MODE
from maniuz.db import sqlite as db

from conftest import login, register


def _add(client, product_id, quantity=1, unit="piece"):
    return client.post(
        "/cart/add", data={"product_id": product_id, "quantity": quantity, "unit": unit}, follow_redirects=False
    )


class TestCatalog:
    def test_prices_hidden_for_guests(self, client, cola):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Cola 330ml" in resp.text
        assert "view_price" in resp.text
        assert "8.50 UZS" not in resp.text

    def test_prices_for_signed_in_tier(self, client, tiers, cola):
        register(client)
        resp = client.get(f"/product/{cola}")
        assert "8.50 UZS" in resp.text
        assert "204.00 UZS" in resp.text

    def test_unknown_product(self, client):
        assert client.get("/product/999").status_code == 404

    def test_test_mode_banner(self, client):
        assert "test_mode_banner" not in client.get("/about").text
        db.set_setting(SETTING_TEST_MODE, True)
        assert "test_mode_banner" in client.get("/about").text

    def test_language_switch(self, client):
        db.save_translation("about_title", {"uz": "Biz haqimizda", "ru": "О нас"})
        resp = client.get("/language/ru", headers={"referer": "/about"}, follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/about"
        assert resp.cookies[LANGUAGE_COOKIE] == "ru"
        assert "О нас" in client.get("/about").text

    @pytest.mark.parametrize(
        "referer,location",
        [
            ("http://testserver/cart?x=1", "/cart?x=1"),
            ("https://evil.example/phish", "/"),
            ("//evil.example/phish", "/"),
            ("javascript:alert(1)", "/"),
            ("cart", "/"),
        ],
    )
    def test_language_switch_stays_on_site(self, client, referer, location):
        resp = client.get("/language/tr", headers={"referer": referer}, follow_redirects=False)
        assert resp.headers["location"] == location

    def test_unknown_language(self, client):
        assert client.get("/language/en").status_code == 404


class TestAccount:
    def test_register_logs_in(self, client, tiers):
        resp = register(client, nickname="ali_b", phone="+998901234567")
        assert resp.status_code == 303
        profile = client.get("/profile")
        assert "ali@example.com" in profile.text
        assert "Retail" in profile.text

    def test_register_error_keeps_form(self, client):
        resp = register(client, password="123", name="Ali Valiyev")
        assert resp.status_code == 400
        assert "validation_password_length" in resp.text
        assert "Ali Valiyev" in resp.text

    def test_login_logout(self, client):
        register(client)
        client.post("/logout")
        assert client.get("/orders", follow_redirects=False).headers["location"] == "/login"
        assert login(client, "ali@example.com", "wrong!!").status_code == 400
        assert login(client, "ali@example.com").status_code == 303
        assert client.get("/orders").status_code == 200

    def test_nickname_check_api(self, client):
        register(client, nickname="ali_b")
        assert client.get("/api/nickname-check", params={"nickname": "ali_b"}).json() == {"available": False}
        assert client.get("/api/nickname-check", params={"nickname": "al"}).json() == {"available": None}

    def test_geocode_api_without_key(self, client):
        resp = client.get("/api/geocode", params={"lat": 41.55, "lng": 60.63})
        assert resp.json() == {"lat": 41.55, "lng": 60.63, "address": None}


class TestCartAndCheckout:
    def test_cart_requires_login(self, client, cola):
        resp = _add(client, cola)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/login"

    def test_add_update_remove(self, client, cola):
        register(client)
        assert _add(client, cola, 2).headers["location"] == "/cart?msg=cart_item_added"
        _add(client, cola, 1, "box")
        page = client.get("/cart")
        assert "221.00 UZS" in page.text

        client.post("/cart/update", data={"product_id": cola, "quantity": 4, "unit": "piece"})
        client.post("/cart/remove", data={"product_id": cola, "unit": "box"})
        assert "34.00 UZS" in client.get("/cart").text

    def test_add_more_than_stock(self, client, cola):
        register(client)
        resp = _add(client, cola, 5, "box")
        assert resp.headers["location"] == f"/product/{cola}?err=order_error_stock"

    def test_checkout_creates_order_and_clears_cart(self, client, tiers, cola):
        register(client)
        _add(client, cola, 3)
        resp = client.post(
            "/cart/checkout",
            data={"delivery_type": "delivery", "delivery_address": "Urgench", "latitude": "41.55", "longitude": "60.63"},
            follow_redirects=False,
        )
        assert resp.headers["location"] == "/orders?msg=order_created"

        orders = db.list_orders()
        assert len(orders) == 1
        assert orders[0]["total_amount"] == 25.5
        assert orders[0]["delivery_address"] == "Urgench"
        assert db.get_product(cola)["stock"] == 97
        assert "cart_empty" in client.get("/cart").text
        assert f"#{orders[0]['id']}" in client.get("/orders").text

    def test_empty_cart_checkout(self, client):
        register(client)
        resp = client.post("/cart/checkout", data={}, follow_redirects=False)
        assert resp.headers["location"] == "/cart?err=cart_empty"

    def test_checkout_stock_gone(self, client, cola):
        register(client)
        _add(client, cola, 10)
        db.update_product(cola, "Cola 330ml", stock=5)
        resp = client.post("/cart/checkout", data={"delivery_type": "pickup"}, follow_redirects=False)
        assert resp.headers["location"] == "/cart?err=order_error_stock"
        assert db.list_orders() == []


class TestLeadForms:
    def test_partnership(self, client):
        resp = client.post(
            "/partnership",
            data={"name": "Ali", "email": "ali@example.com", "phone": "+998901234567", "message": "Hi"},
            follow_redirects=False,
        )
        assert resp.headers["location"] == "/partnership?msg=partnership_success"
        app = db.list_partnerships()[0]
        assert (app["status"], app["notes"]) == ("pending", "")

    def test_contact(self, client):
        client.post("/contact", data={"name": "Ali", "email": "ali@example.com", "message": "Hello"})
        assert db.list_contact_messages()[0]["status"] == "unread"
