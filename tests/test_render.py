from keyshare import render
from keyshare.models import Snippet


def test_fmt_expires_is_utc():
    assert render.fmt_expires(0) == "1970-01-01 00:00 UTC"
    assert render.fmt_expires(86_400_000 + 90_000) == "1970-01-02 00:01 UTC"


def test_snippet_payload_is_escaped():
    msgs = render.snippet_messages(Snippet(payload="<b>hi</b> & bye", expires_at=0))

    assert msgs[0].startswith("⏳")
    assert msgs[1] == "<pre>&lt;b&gt;hi&lt;/b&gt; &amp; bye</pre>"


def test_long_snippet_is_split_under_limit():
    payload = "<" * 3000 + "a" * 7000
    msgs = render.snippet_messages(Snippet(payload=payload, expires_at=0))

    assert len(msgs) > 2
    assert all(len(m) <= render.MESSAGE_LIMIT for m in msgs)
    body = "".join(m[len("<pre>"):-len("</pre>")] for m in msgs[1:])
    assert body == "&lt;" * 3000 + "a" * 7000


def test_share_created_mentions_everything():
    text = render.share_created("https://t.me/bot?start=abc", "abc", "tok", 0)

    assert "https://t.me/bot?start=abc" in text
    assert "<code>abc</code>" in text
    assert "<code>tok</code>" in text
    assert "1970-01-01 00:00 UTC" in text
