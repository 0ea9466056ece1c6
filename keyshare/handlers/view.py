from aiogram import Router, types
from aiogram.filters import Command, CommandObject
from .. import render
from ..errors import Expired, NotFound
from ..store import KeyshareStore
from ..utils import extract_share_id

router = Router()

NOT_FOUND = "🤷 Ничего не найдено: ссылка неверна или запись уже удалена."
EXPIRED = "⌛ Срок действия истёк, запись удалена."

async def show_snippet(m: types.Message, store: KeyshareStore, share_id: str):
    try:
        snippet = await store.get(share_id)
    except NotFound:
        await m.answer(NOT_FOUND)
        return
    except Expired:
        await m.answer(EXPIRED)
        return
    for text in render.snippet_messages(snippet):
        await m.answer(text)

@router.message(Command("get"))
async def get_cmd(m: types.Message, command: CommandObject, store: KeyshareStore):
    share_id = extract_share_id(command.args)
    if not share_id:
        await m.answer("Использование: /get &lt;ID или ссылка&gt;")
        return
    await show_snippet(m, store, share_id)
