from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from maniuz.constants import ORDER_STATUSES


def main_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text="/help"), KeyboardButton(text="/stats")],
            [KeyboardButton(text="/orders"), KeyboardButton(text="/partnerships")],
            [KeyboardButton(text="/backup"), KeyboardButton(text="/ping")],
        ],
        resize_keyboard=True,
    )


def status_kb() -> ReplyKeyboardMarkup:
    rows = [[KeyboardButton(text=s) for s in ORDER_STATUSES[:2]], [KeyboardButton(text=s) for s in ORDER_STATUSES[2:]]]
    rows.append([KeyboardButton(text="/cancel")])
    return ReplyKeyboardMarkup(keyboard=rows, resize_keyboard=True, one_time_keyboard=True)
