import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv(os.path.join(os.getcwd(), ".env"))

@dataclass
class Settings:
    bot_token: str = os.getenv("BOT_TOKEN", "")
    db_path: str = os.getenv("DB_PATH", "data/keyshare.sqlite3")
    text_limit: int = int(os.getenv("TEXT_LIMIT", "10000"))
    ttl_default: int = int(os.getenv("TTL_DEFAULT", "600"))
    ttl_min: int = int(os.getenv("TTL_MIN", "60"))
    ttl_max: int = int(os.getenv("TTL_MAX", str(7 * 86400)))

settings = Settings()
