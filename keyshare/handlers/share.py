import logging
from aiogram import Bot, Router, types, F
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.utils.deep_linking import create_start_link
from .. import render
from ..config import settings
from ..errors import Conflict
from ..keyboards import delete_kb, ttl_kb
from ..states import NewShare
from ..store import KeyshareStore
from ..utils import clamp_ttl, new_secret

router = Router()
log = logging.getLogger(__name__)

@router.message(Command("new"))
async def new_cmd(m: types.Message, state: FSMContext):
    await state.clear()
    await m.answer(f"Отправьте текст, которым хотите поделиться (до {settings.text_limit} символов):")
    await state.set_state(NewShare.waiting_text)

@router.message(Command("cancel"))
async def cancel_cmd(m: types.Message, state: FSMContext):
    await state.clear()
    await m.answer("Отменено.")

@router.message(NewShare.waiting_text, F.text, ~F.text.startswith("/"))
async def got_text(m: types.Message, state: FSMContext):
    text = m.text or ""
    if not text.strip():
        await m.answer("Текст пустой, пришлите что-нибудь.")
        return
    if len(text) > settings.text_limit:
        await m.answer(f"Слишком длинно: {len(text)} символов, максимум {settings.text_limit}.")
        return
    await state.update_data(text=text)
    await m.answer("Сколько хранить?", reply_markup=ttl_kb())
    await state.set_state(NewShare.waiting_ttl)

@router.callback_query(NewShare.waiting_ttl, F.data.startswith("ttl:"))
async def chose_ttl(cq: types.CallbackQuery, state: FSMContext, store: KeyshareStore, bot: Bot):
    await cq.answer()
    data = await state.get_data()
    await state.clear()
    text = data.get("text") or ""
    if not text:
        await cq.message.answer("Текст потерялся, начните заново: /new")
        return

    ttl = clamp_ttl(cq.data.split(":", 1)[1])
    share_id, token = new_secret(), new_secret()
    try:
        expires_at = await store.create(share_id, text, ttl, token)
    except Conflict:
        log.warning("id collision on %s", share_id)
        await cq.message.answer("Не получилось создать ссылку, попробуйте ещё раз: /new")
        return

    link = await create_start_link(bot, share_id)
    await cq.message.answer(
        render.share_created(link, share_id, token, expires_at),
        reply_markup=delete_kb(share_id, token),
    )
