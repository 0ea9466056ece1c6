import math
import re
import secrets
import time
from typing import Optional

from ..config import settings

SHARE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
START_LINK_RE = re.compile(r"[?&]start=([A-Za-z0-9_-]{1,64})")

def now_ms() -> int:
    return int(time.time() * 1000)

def new_secret() -> str:
    # 128 random bits; the urlsafe alphabet is also valid in a deep-link payload
    return secrets.token_urlsafe(16)

def clamp_ttl(value, default: int | None = None, lo: int | None = None, hi: int | None = None) -> int:
    default = settings.ttl_default if default is None else default
    lo = settings.ttl_min if lo is None else lo
    hi = settings.ttl_max if hi is None else hi
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(num):
        return default
    ttl = math.floor(num)
    if ttl < lo:
        return lo
    if ttl > hi:
        return hi
    return ttl

def extract_share_id(text: str | None) -> Optional[str]:
    """Accept either a bare id or a t.me share link and return the id."""
    raw = (text or "").strip()
    if not raw:
        return None
    m = START_LINK_RE.search(raw)
    if m:
        return m.group(1)
    if SHARE_ID_RE.match(raw):
        return raw
    return None
