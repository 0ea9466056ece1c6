from aiogram.fsm.state import State, StatesGroup

class NewShare(StatesGroup):
    waiting_text = State()
    waiting_ttl = State()
