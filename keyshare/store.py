# Single-writer store: every operation, the wake-triggered sweep included,
# runs under one lock and ends by re-arming the wake at MIN(expires_at).
import asyncio
import logging
import secrets
from typing import Callable

import aiosqlite

from . import db as table
from .errors import Conflict, Expired, Forbidden, InvalidInput, NotFound
from .models import Record, Snippet
from .scheduler import WakeScheduler
from .utils import clamp_ttl, now_ms

log = logging.getLogger(__name__)

class KeyshareStore:
    def __init__(self, db: aiosqlite.Connection, *, clock: Callable[[], int] = now_ms):
        self._db = db
        self._clock = clock
        self._lock = asyncio.Lock()
        self.wake = WakeScheduler(self.sweep, clock=clock)

    @classmethod
    async def open(cls, path: str, *, clock: Callable[[], int] = now_ms) -> "KeyshareStore":
        db = await table.connect(path)
        store = cls(db, clock=clock)
        try:
            await store.start()
        except BaseException:
            await store.close()
            raise
        return store

    async def start(self):
        # drops whatever expired while we were down and arms the first wake
        removed = await self.sweep()
        log.info("store ready, %d stale record(s) removed, next wake at %s", removed, self.wake.pending)

    async def close(self):
        await self.wake.drain()
        self.wake.clear()
        await self._db.close()

    async def create(self, record_id: str, payload: str, ttl_seconds, delete_token: str) -> int:
        """Store a record and return its ``expires_at`` (ms since epoch).

        Raises InvalidInput on an empty id, payload or token, and Conflict
        when the id is already taken.
        """
        if not record_id or not payload or not delete_token:
            raise InvalidInput("id, payload and delete token are required")
        ttl = clamp_ttl(ttl_seconds)

        async with self._lock:
            now = self._clock()
            rec = Record(
                id=record_id,
                payload=payload,
                expires_at=now + ttl * 1000,
                delete_token=delete_token,
                created_at=now,
            )
            try:
                await table.insert_record(self._db, rec)
            except aiosqlite.IntegrityError as e:
                raise Conflict(f"record {record_id!r} already exists") from e
            await self._reschedule()

        log.info("created %s, ttl=%ds", record_id, ttl)
        return rec.expires_at

    async def get(self, record_id: str) -> Snippet:
        async with self._lock:
            rec = await table.select_record(self._db, record_id)
            if rec is None:
                raise NotFound(record_id)
            if rec.expires_at <= self._clock():
                await table.delete_record(self._db, record_id)
                await self._reschedule()
                log.info("expired on read: %s", record_id)
                raise Expired(record_id)
            return Snippet(payload=rec.payload, expires_at=rec.expires_at)

    async def delete(self, record_id: str, delete_token: str):
        # existence is checked before the token; NotFound vs Forbidden tells the ids apart
        async with self._lock:
            rec = await table.select_record(self._db, record_id)
            if rec is None:
                raise NotFound(record_id)
            if not secrets.compare_digest(rec.delete_token.encode(), (delete_token or "").encode()):
                raise Forbidden(record_id)
            await table.delete_record(self._db, record_id)
            await self._reschedule()
        log.info("deleted %s", record_id)

    async def sweep(self) -> int:
        """Remove every record past expiry and re-arm the wake."""
        async with self._lock:
            removed = await table.delete_expired(self._db, self._clock())
            await self._reschedule()
        if removed:
            log.info("sweep removed %d record(s)", removed)
        return removed

    async def _reschedule(self):
        # caller holds the lock
        nxt = await table.min_expires_at(self._db)
        if nxt is None:
            self.wake.clear()
        else:
            self.wake.schedule(nxt)
