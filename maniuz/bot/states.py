from aiogram.fsm.state import State, StatesGroup


class OrderStatusChange(StatesGroup):
    waiting_order_id = State()
    waiting_status = State()
