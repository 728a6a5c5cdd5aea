import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from maniuz.bot import handlers
from maniuz.bot.states import OrderStatusChange
from maniuz.db import sqlite as db
from maniuz.services import notify

ADMIN_ID = 42


def _message(text, user_id=ADMIN_ID):
    return SimpleNamespace(text=text, from_user=SimpleNamespace(id=user_id), answer=AsyncMock())


def _answers(message):
    return [call.args[0] for call in message.answer.await_args_list]


@pytest.fixture()
def order(tiers, cola):
    cid = db.add_customer("ali@example.com", "Ali", "hash", tiers[0])
    ok, order = db.create_order(cid, "Ali <b>", tiers[0], [{"product_id": cola, "quantity": 2}], "pickup")
    assert ok
    return order


def test_strangers_are_ignored():
    message = _message("/ping", user_id=7)
    asyncio.run(handlers.cmd_ping(message))
    message.answer.assert_not_awaited()


def test_ping():
    message = _message("/ping")
    asyncio.run(handlers.cmd_ping(message))
    assert _answers(message) == ["pong ✅"]


def test_orders_list_escapes_names(order):
    message = _message("/orders pending")
    asyncio.run(handlers.cmd_orders(message))
    text = _answers(message)[0]
    assert f"#{order['id']}" in text
    assert "Ali &lt;b&gt;" in text


def test_orders_rejects_unknown_status():
    message = _message("/orders lost")
    asyncio.run(handlers.cmd_orders(message))
    assert "pending" in _answers(message)[0]


def test_status_in_one_command(order):
    message = _message(f"/status {order['id']} preparing")
    asyncio.run(handlers.cmd_status(message, AsyncMock()))
    assert db.get_order(order["id"])["status"] == "preparing"


def test_status_wizard(order):
    state = AsyncMock()
    asyncio.run(handlers.cmd_status(_message("/status"), state))
    state.set_state.assert_awaited_with(OrderStatusChange.waiting_order_id)

    asyncio.run(handlers.status_wait_order_id(_message(f"#{order['id']}"), state))
    state.update_data.assert_awaited_with(order_id=order["id"])
    state.set_state.assert_awaited_with(OrderStatusChange.waiting_status)

    state.get_data.return_value = {"order_id": order["id"]}
    asyncio.run(handlers.status_wait_status(_message("Delivering"), state))
    state.clear.assert_awaited()
    assert db.get_order(order["id"])["status"] == "delivering"


def test_order_not_found():
    message = _message("/order 999")
    asyncio.run(handlers.cmd_order(message))
    assert "999" in _answers(message)[0]


def test_notify_without_token_is_noop():
    assert asyncio.run(notify.notify_admin("hello")) is False


def test_order_text(order):
    text = notify.order_text(order)
    assert "Ali &lt;b&gt;" in text
    assert "Cola 330ml" in text
    assert "17.00 UZS" in text
