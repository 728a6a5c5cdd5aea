from __future__ import annotations

import json
import logging
import os
import sqlite3
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from maniuz.config import settings
from maniuz.constants import (
    CONTACT_STATUSES,
    DEFAULT_ITEMS_PER_BOX,
    DELIVERY_DELIVERY,
    DELIVERY_TYPES,
    LANGUAGES,
    ORDER_STATUSES,
    PARTNERSHIP_STATUSES,
    ROLE_ADMIN,
    ROLES,
    UNIT_BOX,
    UNITS,
)
from maniuz.services import pricing

logger = logging.getLogger(__name__)


def _connect() -> sqlite3.Connection:
    os.makedirs(os.path.dirname(os.path.abspath(settings.db_path)), exist_ok=True)
    conn = sqlite3.connect(settings.db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def init_db() -> None:
    conn = _connect()
    try:
        with open(os.path.join(os.path.dirname(__file__), "schema.sql"), "r", encoding="utf-8") as f:
            conn.executescript(f.read())
        conn.commit()
    finally:
        conn.close()


# ---------------- price types ----------------

def list_price_types() -> List[Dict[str, Any]]:
    conn = _connect()
    try:
        rows = conn.execute(
            "SELECT id, name, description, created_at FROM price_types ORDER BY id"
        ).fetchall()
        return [dict(r) for r in rows]
    finally:
        conn.close()


def get_price_type(price_type_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute(
            "SELECT id, name, description, created_at FROM price_types WHERE id=?",
            (price_type_id,),
        ).fetchone()
        return dict(row) if row else None
    finally:
        conn.close()


def add_price_type(name: str, description: str = "") -> int:
    name = name.strip()
    if not name:
        raise ValueError("name must not be empty")
    conn = _connect()
    try:
        cur = conn.execute(
            "INSERT INTO price_types(name, description, created_at) VALUES(?,?,?)",
            (name, description.strip(), _now()),
        )
        conn.commit()
        return int(cur.lastrowid)
    finally:
        conn.close()


def update_price_type(price_type_id: int, name: str, description: str = "") -> bool:
    name = name.strip()
    if not name:
        raise ValueError("name must not be empty")
    conn = _connect()
    try:
        cur = conn.execute(
            "UPDATE price_types SET name=?, description=? WHERE id=?",
            (name, description.strip(), price_type_id),
        )
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


def delete_price_type(price_type_id: int) -> bool:
    # product_prices уходят каскадом, у клиентов price_type_id станет NULL
    conn = _connect()
    try:
        cur = conn.execute("DELETE FROM price_types WHERE id=?", (price_type_id,))
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


# ---------------- products ----------------

def _attach_prices(conn: sqlite3.Connection, products: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    by_id = {p["id"]: p for p in products}
    for p in products:
        p["prices"] = {}
        p["box_prices"] = {}
    if not by_id:
        return products
    marks = ",".join("?" for _ in by_id)
    rows = conn.execute(
        f"SELECT product_id, price_type_id, unit_price, box_price FROM product_prices WHERE product_id IN ({marks})",
        tuple(by_id.keys()),
    ).fetchall()
    for r in rows:
        p = by_id[r["product_id"]]
        p["prices"][int(r["price_type_id"])] = float(r["unit_price"])
        if r["box_price"] is not None:
            p["box_prices"][int(r["price_type_id"])] = float(r["box_price"])
    return products


def _load_product(conn: sqlite3.Connection, product_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        """
        SELECT id, name, description, image_url, stock, items_per_box, created_at, updated_at
        FROM products WHERE id=?
        """,
        (product_id,),
    ).fetchone()
    if not row:
        return None
    return _attach_prices(conn, [dict(row)])[0]


def _write_prices(
    conn: sqlite3.Connection,
    product_id: int,
    prices: Dict[int, float],
    box_prices: Optional[Dict[int, float]],
) -> None:
    box_prices = box_prices or {}
    conn.execute("DELETE FROM product_prices WHERE product_id=?", (product_id,))
    for pt_id in set(prices) | set(box_prices):
        unit = float(prices.get(pt_id) or 0)
        box = box_prices.get(pt_id)
        if unit < 0 or (box is not None and box < 0):
            raise ValueError("price must be >= 0")
        conn.execute(
            "INSERT INTO product_prices(product_id, price_type_id, unit_price, box_price) VALUES(?,?,?,?)",
            (product_id, int(pt_id), unit, None if box is None else float(box)),
        )


def _check_product_fields(name: str, stock: int, items_per_box: Optional[int]) -> None:
    if not name.strip():
        raise ValueError("name must not be empty")
    if stock < 0:
        raise ValueError("stock must be >= 0")
    if items_per_box is not None and items_per_box <= 0:
        raise ValueError("items_per_box must be > 0")


def list_products(in_stock_only: bool = False) -> List[Dict[str, Any]]:
    conn = _connect()
    try:
        sql = "SELECT id, name, description, image_url, stock, items_per_box, created_at, updated_at FROM products"
        if in_stock_only:
            sql += " WHERE stock > 0"
        sql += " ORDER BY name COLLATE NOCASE, id"
        rows = conn.execute(sql).fetchall()
        return _attach_prices(conn, [dict(r) for r in rows])
    finally:
        conn.close()


def get_product(product_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        return _load_product(conn, product_id)
    finally:
        conn.close()


def get_products(product_ids: Iterable[int]) -> Dict[int, Dict[str, Any]]:
    ids = sorted({int(i) for i in product_ids})
    if not ids:
        return {}
    conn = _connect()
    try:
        marks = ",".join("?" for _ in ids)
        rows = conn.execute(
            f"""
            SELECT id, name, description, image_url, stock, items_per_box, created_at, updated_at
            FROM products WHERE id IN ({marks})
            """,
            tuple(ids),
        ).fetchall()
        return {p["id"]: p for p in _attach_prices(conn, [dict(r) for r in rows])}
    finally:
        conn.close()


def add_product(
    name: str,
    description: str = "",
    image_url: str = "",
    stock: int = 0,
    items_per_box: Optional[int] = DEFAULT_ITEMS_PER_BOX,
    prices: Optional[Dict[int, float]] = None,
    box_prices: Optional[Dict[int, float]] = None,
) -> int:
    _check_product_fields(name, stock, items_per_box)
    created_at = _now()
    conn = _connect()
    try:
        conn.execute("BEGIN")
        cur = conn.execute(
            """
            INSERT INTO products(name, description, image_url, stock, items_per_box, created_at, updated_at)
            VALUES(?,?,?,?,?,?,?)
            """,
            (name.strip(), description, image_url, int(stock), items_per_box, created_at, created_at),
        )
        product_id = int(cur.lastrowid)
        _write_prices(conn, product_id, prices or {}, box_prices)
        conn.commit()
        return product_id
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def update_product(
    product_id: int,
    name: str,
    description: str = "",
    image_url: str = "",
    stock: int = 0,
    items_per_box: Optional[int] = DEFAULT_ITEMS_PER_BOX,
    prices: Optional[Dict[int, float]] = None,
    box_prices: Optional[Dict[int, float]] = None,
) -> bool:
    _check_product_fields(name, stock, items_per_box)
    conn = _connect()
    try:
        conn.execute("BEGIN")
        cur = conn.execute(
            """
            UPDATE products
            SET name=?, description=?, image_url=?, stock=?, items_per_box=?, updated_at=?
            WHERE id=?
            """,
            (name.strip(), description, image_url, int(stock), items_per_box, _now(), product_id),
        )
        if cur.rowcount == 0:
            conn.rollback()
            return False
        _write_prices(conn, product_id, prices or {}, box_prices)
        conn.commit()
        return True
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def delete_product(product_id: int) -> bool:
    conn = _connect()
    try:
        cur = conn.execute("DELETE FROM products WHERE id=?", (product_id,))
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


def set_missing_items_per_box(default: int = DEFAULT_ITEMS_PER_BOX) -> int:
    """Fill items_per_box for products created before box pricing existed."""
    conn = _connect()
    try:
        cur = conn.execute(
            "UPDATE products SET items_per_box=? WHERE items_per_box IS NULL OR items_per_box <= 0",
            (int(default),),
        )
        conn.commit()
        if cur.rowcount:
            logger.info("items_per_box=%s set on %s products", default, cur.rowcount)
        return cur.rowcount
    finally:
        conn.close()


# ---------------- customers ----------------

_CUSTOMER_COLS = "id, email, name, nickname, phone, price_type_id, role, password_hash, created_at"


def add_customer(
    email: str,
    name: str,
    password_hash: str,
    price_type_id: Optional[int],
    role: str = "customer",
    nickname: Optional[str] = None,
    phone: Optional[str] = None,
) -> int:
    if role not in ROLES:
        raise ValueError(f"unknown role: {role}")
    conn = _connect()
    try:
        cur = conn.execute(
            """
            INSERT INTO customers(email, name, nickname, phone, price_type_id, role, password_hash, created_at)
            VALUES(?,?,?,?,?,?,?,?)
            """,
            (email.strip(), name.strip(), nickname or None, phone or None, price_type_id, role, password_hash, _now()),
        )
        conn.commit()
        return int(cur.lastrowid)
    finally:
        conn.close()


def get_customer(customer_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute(f"SELECT {_CUSTOMER_COLS} FROM customers WHERE id=?", (customer_id,)).fetchone()
        return dict(row) if row else None
    finally:
        conn.close()


def get_customer_by_email(email: str) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute(
            f"SELECT {_CUSTOMER_COLS} FROM customers WHERE email = ? COLLATE NOCASE",
            (email.strip(),),
        ).fetchone()
        return dict(row) if row else None
    finally:
        conn.close()


def nickname_exists(nickname: str) -> bool:
    conn = _connect()
    try:
        row = conn.execute("SELECT 1 FROM customers WHERE nickname=?", (nickname,)).fetchone()
        return row is not None
    finally:
        conn.close()


def list_customers() -> List[Dict[str, Any]]:
    """Admins first, then everybody else by name."""
    conn = _connect()
    try:
        rows = conn.execute(
            f"""
            SELECT {_CUSTOMER_COLS} FROM customers
            ORDER BY CASE WHEN role = ? THEN 0 ELSE 1 END, name COLLATE NOCASE, id
            """,
            (ROLE_ADMIN,),
        ).fetchall()
        return [dict(r) for r in rows]
    finally:
        conn.close()


def update_customer_access(customer_id: int, price_type_id: Optional[int], role: str) -> bool:
    if role not in ROLES:
        raise ValueError(f"unknown role: {role}")
    conn = _connect()
    try:
        cur = conn.execute(
            "UPDATE customers SET price_type_id=?, role=? WHERE id=?",
            (price_type_id, role, customer_id),
        )
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


# ---------------- orders ----------------

def _load_order_items(conn: sqlite3.Connection, order_id: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        """
        SELECT product_id, product_name, quantity, unit, items_per_box, price, line_total
        FROM order_items WHERE order_id=? ORDER BY id
        """,
        (order_id,),
    ).fetchall()
    return [dict(r) for r in rows]


_ORDER_COLS = (
    "id, customer_id, customer_name, total_amount, delivery_type, delivery_address, "
    "latitude, longitude, status, created_at"
)


def create_order(
    customer_id: int,
    customer_name: str,
    price_type_id: Optional[int],
    lines: List[Dict[str, Any]],
    delivery_type: str,
    delivery_address: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> Tuple[bool, Any]:
    """
    Checkout in one transaction:
    - check every product exists and stock covers the requested pieces
    - decrement stock
    - write orders + order_items with prices of the customer's tier
    Returns (True, order) or (False, error_key).
    """
    if not lines:
        return False, "cart_empty"
    if delivery_type not in DELIVERY_TYPES:
        return False, "order_error_delivery_type"
    if delivery_type != DELIVERY_DELIVERY:
        delivery_address, latitude, longitude = None, None, None

    conn = _connect()
    try:
        # остатки читаем и списываем под одной блокировкой на запись
        conn.execute("BEGIN IMMEDIATE")
        created_at = _now()

        # 1) товары и остатки (в штуках, по всем строкам одного товара)
        priced = []
        need: Dict[int, int] = {}
        for line in lines:
            unit = line.get("unit", "piece")
            qty = int(line["quantity"])
            if unit not in UNITS or qty <= 0:
                conn.rollback()
                return False, "order_error_line"
            prod = _load_product(conn, int(line["product_id"]))
            if not prod:
                conn.rollback()
                return False, "order_error_product_missing"
            per_box = pricing.items_per_box(prod)
            price = pricing.line_price(prod, price_type_id, unit)
            priced.append((prod, qty, unit, per_box, price))
            need[prod["id"]] = need.get(prod["id"], 0) + pricing.pieces(qty, unit, per_box)

        for prod, *_ in priced:
            if int(prod["stock"]) < need[prod["id"]]:
                conn.rollback()
                logger.info(
                    "stock shortage product=%s have=%s need=%s", prod["id"], prod["stock"], need[prod["id"]]
                )
                return False, "order_error_stock"

        # 2) заказ
        cur = conn.execute(
            """
            INSERT INTO orders(customer_id, customer_name, total_amount, delivery_type,
                               delivery_address, latitude, longitude, status, created_at)
            VALUES(?,?,?,?,?,?,?,?,?)
            """,
            (customer_id, customer_name, 0.0, delivery_type, delivery_address, latitude, longitude,
             ORDER_STATUSES[0], created_at),
        )
        order_id = int(cur.lastrowid)

        # 3) позиции + списание
        total = 0.0
        for prod, qty, unit, per_box, price in priced:
            line_total = round(qty * price, settings.decimals)
            total = round(total + line_total, settings.decimals)
            conn.execute(
                """
                INSERT INTO order_items(order_id, product_id, product_name, quantity, unit, items_per_box, price, line_total)
                VALUES(?,?,?,?,?,?,?,?)
                """,
                (order_id, prod["id"], prod["name"], qty, unit, per_box if unit == UNIT_BOX else 1, price, line_total),
            )
        for pid, pieces_needed in need.items():
            conn.execute("UPDATE products SET stock = stock - ? WHERE id=?", (pieces_needed, pid))

        # 4) итог
        conn.execute("UPDATE orders SET total_amount=? WHERE id=?", (total, order_id))
        conn.commit()

        row = conn.execute(f"SELECT {_ORDER_COLS} FROM orders WHERE id=?", (order_id,)).fetchone()
        order = dict(row)
        order["items"] = _load_order_items(conn, order_id)
        logger.info("order #%s created customer=%s total=%s", order_id, customer_id, total)
        return True, order
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def get_order(order_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute(f"SELECT {_ORDER_COLS} FROM orders WHERE id=?", (order_id,)).fetchone()
        if not row:
            return None
        order = dict(row)
        order["items"] = _load_order_items(conn, order_id)
        return order
    finally:
        conn.close()


def _list_orders(where: str, params: tuple) -> List[Dict[str, Any]]:
    conn = _connect()
    try:
        rows = conn.execute(
            f"SELECT {_ORDER_COLS} FROM orders {where} ORDER BY created_at DESC, id DESC",
            params,
        ).fetchall()
        orders = [dict(r) for r in rows]
        for o in orders:
            o["items"] = _load_order_items(conn, o["id"])
        return orders
    finally:
        conn.close()


def list_orders(status: Optional[str] = None) -> List[Dict[str, Any]]:
    if status:
        if status not in ORDER_STATUSES:
            raise ValueError(f"unknown order status: {status}")
        return _list_orders("WHERE status=?", (status,))
    return _list_orders("", ())


def list_customer_orders(customer_id: int) -> List[Dict[str, Any]]:
    return _list_orders("WHERE customer_id=?", (customer_id,))


def update_order_status(order_id: int, status: str) -> Tuple[bool, str]:
    if status not in ORDER_STATUSES:
        return False, "order_error_status"
    conn = _connect()
    try:
        cur = conn.execute("UPDATE orders SET status=? WHERE id=?", (status, order_id))
        conn.commit()
        if cur.rowcount == 0:
            return False, "order_not_found"
        logger.info("order #%s -> %s", order_id, status)
        return True, "ok"
    finally:
        conn.close()


# ---------------- partnerships ----------------

_PARTNERSHIP_COLS = "id, name, email, phone, message, status, notes, created_at"


def add_partnership(name: str, email: str, phone: str, message: str = "") -> int:
    conn = _connect()
    try:
        cur = conn.execute(
            """
            INSERT INTO partnerships(name, email, phone, message, status, notes, created_at)
            VALUES(?,?,?,?,?,?,?)
            """,
            (name.strip(), email.strip(), phone.strip(), message.strip(), PARTNERSHIP_STATUSES[0], "", _now()),
        )
        conn.commit()
        return int(cur.lastrowid)
    finally:
        conn.close()


def get_partnership(partnership_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute(
            f"SELECT {_PARTNERSHIP_COLS} FROM partnerships WHERE id=?", (partnership_id,)
        ).fetchone()
        return dict(row) if row else None
    finally:
        conn.close()


def list_partnerships(status: Optional[str] = None) -> List[Dict[str, Any]]:
    conn = _connect()
    try:
        if status:
            if status not in PARTNERSHIP_STATUSES:
                raise ValueError(f"unknown partnership status: {status}")
            rows = conn.execute(
                f"SELECT {_PARTNERSHIP_COLS} FROM partnerships WHERE status=? ORDER BY created_at DESC, id DESC",
                (status,),
            ).fetchall()
        else:
            rows = conn.execute(
                f"SELECT {_PARTNERSHIP_COLS} FROM partnerships ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [dict(r) for r in rows]
    finally:
        conn.close()


def update_partnership(
    partnership_id: int,
    status: Optional[str] = None,
    notes: Optional[str] = None,
) -> Tuple[bool, str]:
    if status is not None and status not in PARTNERSHIP_STATUSES:
        return False, "partnership_error_status"
    conn = _connect()
    try:
        row = conn.execute("SELECT status, notes FROM partnerships WHERE id=?", (partnership_id,)).fetchone()
        if not row:
            return False, "partnership_not_found"
        conn.execute(
            "UPDATE partnerships SET status=?, notes=? WHERE id=?",
            (status or row["status"], row["notes"] if notes is None else notes.strip(), partnership_id),
        )
        conn.commit()
        return True, "ok"
    finally:
        conn.close()


def delete_partnership(partnership_id: int) -> bool:
    conn = _connect()
    try:
        cur = conn.execute("DELETE FROM partnerships WHERE id=?", (partnership_id,))
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


def partnership_counts() -> Dict[str, int]:
    conn = _connect()
    try:
        counts = {s: 0 for s in PARTNERSHIP_STATUSES}
        rows = conn.execute("SELECT status, COUNT(*) AS n FROM partnerships GROUP BY status").fetchall()
        for r in rows:
            counts[r["status"]] = int(r["n"])
        return counts
    finally:
        conn.close()


# ---------------- contact messages ----------------

def add_contact_message(name: str, email: str, phone: str, message: str) -> int:
    conn = _connect()
    try:
        cur = conn.execute(
            "INSERT INTO contact_messages(name, email, phone, message, status, created_at) VALUES(?,?,?,?,?,?)",
            (name.strip(), email.strip(), phone.strip(), message.strip(), CONTACT_STATUSES[0], _now()),
        )
        conn.commit()
        return int(cur.lastrowid)
    finally:
        conn.close()


def list_contact_messages() -> List[Dict[str, Any]]:
    conn = _connect()
    try:
        rows = conn.execute(
            """
            SELECT id, name, email, phone, message, status, created_at
            FROM contact_messages ORDER BY created_at DESC, id DESC
            """
        ).fetchall()
        return [dict(r) for r in rows]
    finally:
        conn.close()


def mark_contact_message_read(message_id: int) -> bool:
    conn = _connect()
    try:
        cur = conn.execute("UPDATE contact_messages SET status='read' WHERE id=?", (message_id,))
        conn.commit()
        return cur.rowcount > 0
    finally:
        conn.close()


# ---------------- translations ----------------

def get_translations(lang: str) -> Dict[str, str]:
    conn = _connect()
    try:
        rows = conn.execute("SELECT key, value FROM translations WHERE lang=?", (lang,)).fetchall()
        return {r["key"]: r["value"] for r in rows}
    finally:
        conn.close()


def list_translation_rows() -> List[Dict[str, str]]:
    """One row per key with a column for every language ('' where missing)."""
    conn = _connect()
    try:
        rows = conn.execute("SELECT lang, key, value FROM translations ORDER BY key").fetchall()
    finally:
        conn.close()

    by_key: Dict[str, Dict[str, str]] = {}
    for r in rows:
        item = by_key.setdefault(r["key"], {"key": r["key"], **{lang: "" for lang in LANGUAGES}})
        if r["lang"] in LANGUAGES:
            item[r["lang"]] = r["value"]
    return [by_key[k] for k in sorted(by_key)]


def save_translation(key: str, values: Dict[str, str]) -> None:
    key = key.strip()
    if not key:
        raise ValueError("key must not be empty")
    conn = _connect()
    try:
        for lang in LANGUAGES:
            if lang not in values:
                continue
            conn.execute(
                "INSERT INTO translations(lang, key, value) VALUES(?,?,?) "
                "ON CONFLICT(lang, key) DO UPDATE SET value=excluded.value",
                (lang, key, values[lang] or ""),
            )
        conn.commit()
    finally:
        conn.close()


def delete_translation(key: str) -> int:
    conn = _connect()
    try:
        cur = conn.execute("DELETE FROM translations WHERE key=?", (key,))
        conn.commit()
        return cur.rowcount
    finally:
        conn.close()


def bulk_set_translations(lang: str, mapping: Dict[str, str], overwrite: bool = True) -> int:
    if lang not in LANGUAGES:
        raise ValueError(f"unknown language: {lang}")
    sql = (
        "INSERT INTO translations(lang, key, value) VALUES(?,?,?) "
        + ("ON CONFLICT(lang, key) DO UPDATE SET value=excluded.value" if overwrite else "ON CONFLICT(lang, key) DO NOTHING")
    )
    conn = _connect()
    try:
        written = 0
        for key, value in mapping.items():
            cur = conn.execute(sql, (lang, key, value))
            written += cur.rowcount
        conn.commit()
        return written
    finally:
        conn.close()


# ---------------- settings ----------------

def get_setting(key: str, default: Any = None) -> Any:
    conn = _connect()
    try:
        row = conn.execute("SELECT value FROM settings WHERE key=?", (key,)).fetchone()
    finally:
        conn.close()
    if not row:
        return default
    return json.loads(row["value"])


def set_setting(key: str, value: Any) -> None:
    conn = _connect()
    try:
        conn.execute(
            "INSERT INTO settings(key, value) VALUES(?,?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, json.dumps(value, ensure_ascii=False)),
        )
        conn.commit()
    finally:
        conn.close()


# ---------------- stats ----------------

def get_stats() -> Dict[str, int]:
    conn = _connect()
    try:
        def one(sql: str) -> int:
            return int(conn.execute(sql).fetchone()[0])

        return {
            "products": one("SELECT COUNT(*) FROM products"),
            "customers": one("SELECT COUNT(*) FROM customers"),
            "orders": one("SELECT COUNT(*) FROM orders"),
            "price_types": one("SELECT COUNT(*) FROM price_types"),
            "pending_orders": one("SELECT COUNT(*) FROM orders WHERE status='pending'"),
            "pending_partnerships": one("SELECT COUNT(*) FROM partnerships WHERE status='pending'"),
            "unread_messages": one("SELECT COUNT(*) FROM contact_messages WHERE status='unread'"),
        }
    finally:
        conn.close()
