import pytest
import pytest_asyncio

from keyshare.store import KeyshareStore


T0 = 1_700_000_000_000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def store(clock):
    s = await KeyshareStore.open(":memory:", clock=clock)
    yield s
    await s.close()


class FakeMessage:
    """Captures answers the way aiogram's Message.answer would send them."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.answers = []
        self.markup_edits = []

    async def answer(self, text, **kwargs):
        self.answers.append((text, kwargs))

    async def edit_reply_markup(self, reply_markup=None):
        self.markup_edits.append(reply_markup)


class FakeCallback:
    def __init__(self, data: str) -> None:
        self.data = data
        self.message = FakeMessage()
        self.answers = []

    async def answer(self, text=None, show_alert=False):
        self.answers.append((text, show_alert))


class FakeState:
    """In-memory stand-in for aiogram's FSMContext."""

    def __init__(self) -> None:
        self.state = None
        self.data = {}

    async def set_state(self, state=None):
        self.state = state

    async def get_state(self):
        return self.state

    async def update_data(self, **kwargs):
        self.data.update(kwargs)
        return dict(self.data)

    async def get_data(self):
        return dict(self.data)

    async def clear(self):
        self.state = None
        self.data = {}


@pytest.fixture
def fsm():
    return FakeState()
