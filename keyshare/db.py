import os
import aiosqlite
from typing import Optional
from .models import Record

CREATE_SQL = '''
CREATE TABLE IF NOT EXISTS snippets (
  id TEXT PRIMARY KEY,
  text TEXT NOT NULL,
  expires_at INTEGER NOT NULL,  -- ms since epoch
  delete_token TEXT NOT NULL,
  created_at INTEGER NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_snippets_expires ON snippets(expires_at);
'''

SELECT_COLS = "id, text AS payload, expires_at, delete_token, created_at"

async def init_db(db: aiosqlite.Connection):
    await db.executescript(CREATE_SQL)
    await db.commit()

async def connect(path: str) -> aiosqlite.Connection:
    if path != ":memory:":
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
    db = await aiosqlite.connect(path)
    try:
        db.row_factory = aiosqlite.Row
        if path != ":memory:":
            await db.execute("PRAGMA journal_mode=WAL")
        await init_db(db)
    except BaseException:
        # an open connection keeps its worker thread, and the process, alive
        await db.close()
        raise
    return db

async def insert_record(db: aiosqlite.Connection, r: Record):
    try:
        await db.execute(
            "INSERT INTO snippets(id, text, expires_at, delete_token, created_at) VALUES (?, ?, ?, ?, ?)",
            (r.id, r.payload, r.expires_at, r.delete_token, r.created_at),
        )
    except aiosqlite.IntegrityError:
        await db.rollback()
        raise
    await db.commit()

async def select_record(db: aiosqlite.Connection, record_id: str) -> Optional[Record]:
    cur = await db.execute(f"SELECT {SELECT_COLS} FROM snippets WHERE id=?", (record_id,))
    row = await cur.fetchone()
    await cur.close()
    return Record(**dict(row)) if row else None

async def delete_record(db: aiosqlite.Connection, record_id: str) -> bool:
    cur = await db.execute("DELETE FROM snippets WHERE id=?", (record_id,))
    await db.commit()
    return cur.rowcount > 0

async def delete_expired(db: aiosqlite.Connection, now: int) -> int:
    cur = await db.execute("DELETE FROM snippets WHERE expires_at <= ?", (now,))
    await db.commit()
    return cur.rowcount

async def min_expires_at(db: aiosqlite.Connection) -> Optional[int]:
    # served from idx_snippets_expires
    cur = await db.execute("SELECT MIN(expires_at) FROM snippets")
    row = await cur.fetchone()
    await cur.close()
    return row[0] if row and row[0] is not None else None
