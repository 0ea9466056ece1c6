import pytest

import keyshare.utils as utils_mod
from keyshare.utils import clamp_ttl, extract_share_id, new_secret, now_ms


@pytest.mark.parametrize(
    "value, expected",
    [
        (600, 600),
        ("3600", 3600),
        (59, 60),
        (0, 60),
        (-5, 60),
        (604_801, 604_800),
        (120.7, 120),
        (None, 600),
        ("soon", 600),
        (float("inf"), 600),
    ],
)
def test_clamp_ttl(value, expected):
    assert clamp_ttl(value, default=600, lo=60, hi=604_800) == expected


def test_clamp_ttl_defaults_come_from_settings(monkeypatch):
    monkeypatch.setattr(utils_mod.settings, "ttl_min", 10)
    assert clamp_ttl(1) == 10


def test_now_ms(monkeypatch):
    monkeypatch.setattr(utils_mod.time, "time", lambda: 1_700_000_000.1234)
    assert now_ms() == 1_700_000_000_123


def test_new_secret_is_deep_link_safe():
    a, b = new_secret(), new_secret()
    assert a != b
    assert extract_share_id(a) == a
    assert len(a) == 22


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc_DEF-123", "abc_DEF-123"),
        ("  abc  ", "abc"),
        ("https://t.me/keyshare_bot?start=abc_DEF-123", "abc_DEF-123"),
        ("t.me/keyshare_bot?foo=1&start=xyz", "xyz"),
        ("", None),
        (None, None),
        ("not an id", None),
        ("a/b", None),
    ],
)
def test_extract_share_id(text, expected):
    assert extract_share_id(text) == expected
