from aiogram import Router, types, F
from aiogram.filters import Command, CommandObject
from ..errors import Forbidden, NotFound
from ..store import KeyshareStore
from ..utils import extract_share_id

router = Router()

USAGE = "Использование: /del &lt;ID или ссылка&gt; &lt;токен удаления&gt;"

async def _delete(store: KeyshareStore, share_id: str, token: str) -> str:
    try:
        await store.delete(share_id, token)
    except NotFound:
        return "🤷 Запись не найдена."
    except Forbidden:
        return "⛔ Токен удаления не подходит."
    return "🗑 Удалено."

@router.message(Command("del"))
async def del_cmd(m: types.Message, command: CommandObject, store: KeyshareStore):
    parts = (command.args or "").split()
    if len(parts) != 2:
        await m.answer(USAGE)
        return
    share_id = extract_share_id(parts[0])
    if not share_id:
        await m.answer(USAGE)
        return
    await m.answer(await _delete(store, share_id, parts[1]))

@router.callback_query(F.data.startswith("del:"))
async def del_button(cq: types.CallbackQuery, store: KeyshareStore):
    try:
        _, share_id, token = cq.data.split(":", 2)
    except ValueError:
        await cq.answer("Некорректная кнопка", show_alert=True)
        return
    reply = await _delete(store, share_id, token)
    await cq.answer(reply)
    await cq.message.edit_reply_markup(reply_markup=None)
