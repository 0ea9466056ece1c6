from aiogram import Router, types
from aiogram.filters import CommandStart, Command, CommandObject
from ..store import KeyshareStore
from ..utils import extract_share_id
from .view import show_snippet

router = Router()

WELCOME = (
    "Привет! Я храню короткие тексты по ссылке ограниченное время.\n\n"
    "Команды:\n"
    "/new — создать ссылку\n"
    "/get &lt;ID или ссылка&gt; — открыть запись\n"
    "/del &lt;ID или ссылка&gt; &lt;токен&gt; — удалить запись досрочно\n"
    "/cancel — отменить создание\n"
    "/help — подсказка\n\n"
    "Удалить запись может только тот, у кого есть токен удаления."
)

@router.message(CommandStart(deep_link=True))
async def start_with_link(m: types.Message, command: CommandObject, store: KeyshareStore):
    share_id = extract_share_id(command.args)
    if not share_id:
        await m.answer(WELCOME)
        return
    await show_snippet(m, store, share_id)

@router.message(CommandStart())
async def start(m: types.Message):
    await m.answer(WELCOME)

@router.message(Command("help"))
async def help_cmd(m: types.Message):
    await m.answer(WELCOME)
