import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="maniuz-tests-")
os.environ["DB_PATH"] = os.path.join(_TMP, "maniuz.db")
os.environ["EXPORT_DIR"] = os.path.join(_TMP, "exports")
os.environ["BACKUP_DIR"] = os.path.join(_TMP, "backups")
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ADMIN_EMAIL"] = "boss@maniuz.test"
os.environ["BOT_TOKEN"] = ""
os.environ["ADMIN_TG_ID"] = "42"
os.environ["YANDEX_MAPS_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from maniuz.config import settings  # noqa: E402
from maniuz.db import sqlite as db  # noqa: E402

ADMIN_EMAIL = "boss@maniuz.test"
PASSWORD = "secret1"


@pytest.fixture(autouse=True)
def fresh_db():
    if os.path.exists(settings.db_path):
        os.remove(settings.db_path)
    db.init_db()
    yield


@pytest.fixture()
def client():
    from maniuz.web.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def tiers():
    retail = db.add_price_type("Retail", "shop price")
    wholesale = db.add_price_type("Wholesale")
    return retail, wholesale


@pytest.fixture()
def cola(tiers):
    retail, wholesale = tiers
    return db.add_product(
        name="Cola 330ml",
        description="can",
        stock=100,
        items_per_box=24,
        prices={retail: 8.5, wholesale: 7.0},
        box_prices={wholesale: 150.0},
    )


def register(client, email="ali@example.com", name="Ali", password=PASSWORD, **extra):
    data = {"name": name, "email": email, "password": password, "confirm_password": password}
    data.update(extra)
    return client.post("/register", data=data, follow_redirects=False)


def login(client, email, password=PASSWORD):
    return client.post("/login", data={"email": email, "password": password}, follow_redirects=False)
