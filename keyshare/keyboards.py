from aiogram.utils.keyboard import InlineKeyboardBuilder
from aiogram.types import InlineKeyboardMarkup

TTL_CHOICES = (
    (600, "10 минут"),
    (3600, "1 час"),
    (86400, "1 день"),
    (7 * 86400, "7 дней"),
)

def ttl_kb() -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for seconds, label in TTL_CHOICES:
        kb.button(text=label, callback_data=f"ttl:{seconds}")
    kb.adjust(2)
    return kb.as_markup()

def delete_kb(share_id: str, delete_token: str) -> InlineKeyboardMarkup:
    # callback_data is capped at 64 bytes; two token_urlsafe(16) values fit
    kb = InlineKeyboardBuilder()
    kb.button(text="🗑 Удалить", callback_data=f"del:{share_id}:{delete_token}")
    return kb.as_markup()
