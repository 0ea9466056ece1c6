# keyshare/main.py
from __future__ import annotations
import asyncio, logging
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from .config import settings
from .utils.logging import setup_logging
from .store import KeyshareStore
from .handlers import remove, share, start, view

setup_logging()
log = logging.getLogger("keyshare.main")

def build_dispatcher(store: KeyshareStore) -> Dispatcher:
    dp = Dispatcher()
    dp["store"] = store
    # share last: its FSM handlers match any plain text
    dp.include_routers(start.router, view.router, remove.router, share.router)
    return dp

async def run():
    store = await KeyshareStore.open(settings.db_path)
    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dp = build_dispatcher(store)
    try:
        await dp.start_polling(bot)
    finally:
        await store.close()
        await bot.session.close()

def main():
    if not settings.bot_token:
        raise SystemExit("BOT_TOKEN is not set (see .env)")
    log.info("Bot is running… DB_PATH=%s", settings.db_path)
    asyncio.run(run())

if __name__ == "__main__":
    main()
