from __future__ import annotations

import html
import logging
from typing import Any, Dict

from aiogram import Bot
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.utils.token import TokenValidationError

from maniuz.config import settings
from maniuz.utils.formatters import money

logger = logging.getLogger(__name__)


async def notify_admin(text: str) -> bool:
    """Send an HTML message to the admin chat. Never raises."""
    if not settings.bot_token or not settings.admin_tg_id:
        return False
    try:
        bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    except TokenValidationError:
        logger.error("BOT_TOKEN is malformed, admin notification skipped")
        return False
    try:
        await bot.send_message(settings.admin_tg_id, text)
        return True
    except TelegramAPIError as e:
        logger.error("admin notification failed: %s", e)
        return False
    finally:
        await bot.session.close()


def order_text(order: Dict[str, Any]) -> str:
    lines = [
        f"🛒 <b>Buyurtma #{order['id']}</b>",
        f"Mijoz: {html.escape(order['customer_name'])}",
        f"Turi: {order['delivery_type']}",
    ]
    if order.get("delivery_address"):
        lines.append(f"Manzil: {html.escape(order['delivery_address'])}")
    for it in order.get("items", []):
        lines.append(f"  • {html.escape(it['product_name'])} × {it['quantity']} {it['unit']} = {money(it['line_total'])}")
    lines.append(f"<b>Jami: {money(order['total_amount'])}</b>")
    return "\n".join(lines)


def partnership_text(app: Dict[str, Any]) -> str:
    return (
        f"🤝 <b>Hamkorlik arizasi #{app['id']}</b>\n"
        f"{html.escape(app['name'])} | {html.escape(app['phone'])} | {html.escape(app['email'])}\n"
        f"{html.escape(app.get('message') or '')}"
    )


def contact_text(name: str, phone: str, message: str) -> str:
    return f"📨 <b>Xabar</b>\n{html.escape(name)} | {html.escape(phone)}\n{html.escape(message)}"
