# keyshare/render.py
from __future__ import annotations
from datetime import datetime, timezone
from aiogram import html
from .models import Snippet

# Telegram rejects messages over 4096 characters after entity parsing
MESSAGE_LIMIT = 4000

def fmt_expires(expires_at: int) -> str:
    dt = datetime.fromtimestamp(expires_at / 1000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M UTC")

def _split_escaped(text: str, limit: int) -> list[str]:
    """Режем текст так, чтобы каждый кусок после экранирования влезал в limit."""
    chunks, cur, size = [], [], 0
    for ch in text:
        q = html.quote(ch)
        if size + len(q) > limit and cur:
            chunks.append("".join(cur))
            cur, size = [], 0
        cur.append(q)
        size += len(q)
    if cur:
        chunks.append("".join(cur))
    return chunks

def share_created(link: str, share_id: str, delete_token: str, expires_at: int) -> str:
    parts = [
        "✅ <b>Ссылка создана</b>",
        f"🔗 {html.quote(link)}",
        f"🆔 <b>ID:</b> {html.code(share_id)}",
        f"🔑 <b>Токен удаления:</b> {html.code(delete_token)}",
        f"⏳ <b>Действует до:</b> {fmt_expires(expires_at)}",
        "Храните токен у себя и не пересылайте его вместе со ссылкой.",
    ]
    return "\n".join(parts)

def snippet_messages(snippet: Snippet) -> list[str]:
    header = f"⏳ <b>Действует до:</b> {fmt_expires(snippet.expires_at)}"
    # room for <pre></pre>
    body = [f"<pre>{c}</pre>" for c in _split_escaped(snippet.payload, MESSAGE_LIMIT - 11)]
    return [header] + body
