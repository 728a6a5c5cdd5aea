import html
import logging

from aiogram import Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import FSInputFile, Message, ReplyKeyboardRemove

from maniuz.bot.keyboards import main_kb, status_kb
from maniuz.bot.states import OrderStatusChange
from maniuz.config import settings
from maniuz.constants import ORDER_STATUSES, PARTNERSHIP_STATUSES
from maniuz.db.sqlite import (
    get_order,
    get_stats,
    init_db,
    list_orders,
    list_partnerships,
    update_order_status,
)
from maniuz.services.backup import make_backup
from maniuz.services.notify import order_text
from maniuz.utils.formatters import money

logger = logging.getLogger(__name__)

router = Router()

# сколько строк показываем в списках
LIST_LIMIT = 20


def _is_admin(message: Message) -> bool:
    if message.from_user is None:
        return False
    return int(message.from_user.id) == int(settings.admin_tg_id)


def _parse_order_id(text: str) -> int | None:
    t = text.strip().lstrip("#")
    return int(t) if t.isdigit() else None


async def _apply_status(message: Message, order_id: int, status: str) -> None:
    ok, err = update_order_status(order_id, status)
    if not ok:
        if err == "order_error_status":
            await message.answer(f"❌ Неизвестный статус. Доступно: {', '.join(ORDER_STATUSES)}")
        else:
            await message.answer(f"❌ Заказ #{order_id} не найден")
        return
    await message.answer(f"✅ Заказ #{order_id}: {status}", reply_markup=main_kb())


@router.message(Command("start"))
async def cmd_start(message: Message):
    if not _is_admin(message):
        return
    init_db()
    await message.answer("✅ Maniuz admin bot запущен", reply_markup=main_kb())


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext):
    if not _is_admin(message):
        return
    await state.clear()
    await message.answer("❎ Отменено. Можно вводить команды заново.", reply_markup=ReplyKeyboardRemove())


@router.message(Command("help"))
async def cmd_help(message: Message):
    if not _is_admin(message):
        return

    text = (
        "<b>Maniuz — команды</b>\n\n"
        "<b>Основное</b>\n"
        "/start — запуск\n"
        "/cancel — отмена ввода\n"
        "/help — помощь\n"
        "/ping — проверка\n"
        "/stats — сводка по магазину\n"
        "/backup — бэкап базы + PDF\n\n"
        "<b>Заказы</b>\n"
        "/orders — последние заказы\n"
        f"/orders STATUS — по статусу ({', '.join(ORDER_STATUSES)})\n"
        "/order ID — детали заказа\n"
        "/status ID STATUS — сменить статус\n"
        "/status — мастер смены статуса\n\n"
        "<b>Партнёрство</b>\n"
        "/partnerships — заявки\n"
        f"/partnerships STATUS — по статусу ({', '.join(PARTNERSHIP_STATUSES)})\n"
    )
    await message.answer(text)


@router.message(Command("ping"))
async def cmd_ping(message: Message):
    if not _is_admin(message):
        return
    await message.answer("pong ✅")


@router.message(Command("stats"))
async def cmd_stats(message: Message):
    if not _is_admin(message):
        return
    init_db()
    s = get_stats()
    await message.answer(
        "<b>Сводка</b>\n"
        f"Товары: {s['products']}\n"
        f"Клиенты: {s['customers']}\n"
        f"Типы цен: {s['price_types']}\n"
        f"Заказы: {s['orders']} (ожидают: {s['pending_orders']})\n"
        f"Заявки на партнёрство (новые): {s['pending_partnerships']}\n"
        f"Непрочитанные сообщения: {s['unread_messages']}"
    )


@router.message(Command("backup"))
async def cmd_backup(message: Message):
    if not _is_admin(message):
        return
    try:
        file_path = make_backup()
    except OSError as e:
        logger.exception("backup failed")
        await message.answer(f"❌ Ошибка бэкапа: {e}")
        return
    await message.answer_document(FSInputFile(file_path))


@router.message(Command("orders"))
async def cmd_orders(message: Message):
    if not _is_admin(message):
        return
    init_db()
    parts = message.text.split()
    status = parts[1].strip().lower() if len(parts) > 1 else None
    if status and status not in ORDER_STATUSES:
        await message.answer(f"Статус должен быть одним из: {', '.join(ORDER_STATUSES)}")
        return

    rows = list_orders(status)
    if not rows:
        await message.answer("Заказов пока нет.")
        return
    lines = [f"<b>Заказы{' (' + status + ')' if status else ''}:</b>"]
    for o in rows[:LIST_LIMIT]:
        lines.append(
            f"• #{o['id']} {html.escape(o['customer_name'])} — {money(o['total_amount'])} "
            f"[{o['status']}] {o['created_at']}"
        )
    if len(rows) > LIST_LIMIT:
        lines.append(f"… ещё {len(rows) - LIST_LIMIT}")
    await message.answer("\n".join(lines))


@router.message(Command("order"))
async def cmd_order(message: Message):
    if not _is_admin(message):
        return
    parts = message.text.split()
    order_id = _parse_order_id(parts[1]) if len(parts) == 2 else None
    if order_id is None:
        await message.answer("Формат: /order ID")
        return

    order = get_order(order_id)
    if order is None:
        await message.answer(f"❌ Заказ #{order_id} не найден")
        return
    await message.answer(f"{order_text(order)}\nСтатус: <b>{order['status']}</b>\n{order['created_at']}")


@router.message(Command("status"))
async def cmd_status(message: Message, state: FSMContext):
    if not _is_admin(message):
        return

    parts = message.text.split()
    if len(parts) == 3:
        order_id = _parse_order_id(parts[1])
        if order_id is None:
            await message.answer("Формат: /status ID STATUS")
            return
        await _apply_status(message, order_id, parts[2].strip().lower())
        return

    await state.clear()
    await state.set_state(OrderStatusChange.waiting_order_id)
    await message.answer(
        "Введите номер заказа.\nПример: 12\n\nОтмена: /cancel",
        reply_markup=ReplyKeyboardRemove(),
    )


@router.message(OrderStatusChange.waiting_order_id)
async def status_wait_order_id(message: Message, state: FSMContext):
    if not _is_admin(message):
        return

    order_id = _parse_order_id(message.text or "")
    if order_id is None:
        await message.answer("Номер заказа должен быть числом. Отмена: /cancel")
        return
    order = get_order(order_id)
    if order is None:
        await message.answer(f"❌ Заказ #{order_id} не найден. Введите другой номер или /cancel")
        return

    await state.update_data(order_id=order_id)
    await state.set_state(OrderStatusChange.waiting_status)
    await message.answer(
        f"Заказ #{order_id}, сейчас: <b>{order['status']}</b>\nВыберите новый статус:",
        reply_markup=status_kb(),
    )


@router.message(OrderStatusChange.waiting_status)
async def status_wait_status(message: Message, state: FSMContext):
    if not _is_admin(message):
        return

    status = (message.text or "").strip().lower()
    if status not in ORDER_STATUSES:
        await message.answer(f"Выберите статус кнопкой: {', '.join(ORDER_STATUSES)}", reply_markup=status_kb())
        return

    data = await state.get_data()
    await state.clear()
    await _apply_status(message, int(data["order_id"]), status)


@router.message(Command("partnerships"))
async def cmd_partnerships(message: Message):
    if not _is_admin(message):
        return
    init_db()
    parts = message.text.split()
    status = parts[1].strip().lower() if len(parts) > 1 else None
    if status and status not in PARTNERSHIP_STATUSES:
        await message.answer(f"Статус должен быть одним из: {', '.join(PARTNERSHIP_STATUSES)}")
        return

    rows = list_partnerships(status)
    if not rows:
        await message.answer("Заявок пока нет.")
        return
    lines = ["<b>Заявки на партнёрство:</b>"]
    for a in rows[:LIST_LIMIT]:
        lines.append(
            f"• #{a['id']} {html.escape(a['name'])} | {html.escape(a['phone'])} | "
            f"{html.escape(a['email'])} [{a['status']}]"
        )
    await message.answer("\n".join(lines))
