"""Shared fixtures for ContextClip tests."""

from datetime import datetime, timedelta

import pytest
from loguru import logger

from contextclip.core.clipboard import ClipboardHistory, ClipContext, ClipItem, detect_content_type
from contextclip.core.context import StaticContextProvider


NOW = datetime(2026, 10, 19, 12, 0, 0)


class FakeClipboard:
    """In-memory stand-in for the system clipboard."""

    def __init__(self, content=""):
        self.content = content
        self.fail_reads = False
        self.fail_writes = False

    def read(self):
        if self.fail_reads:
            raise RuntimeError("clipboard unavailable")
        return self.content

    def write(self, text):
        if self.fail_writes:
            return False
        self.content = text
        return True


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def history() -> ClipboardHistory:
    return ClipboardHistory()


@pytest.fixture
def safari_context() -> ClipContext:
    return ClipContext(
        app_name="Safari",
        app_bundle_id="com.apple.Safari",
        window_title="Python docs",
        url="https://docs.python.org/3/",
    )


@pytest.fixture
def provider(safari_context) -> StaticContextProvider:
    return StaticContextProvider(safari_context)


@pytest.fixture
def make_item():
    """Factory for ClipItems with an age relative to NOW."""

    def _make(content, app_name="Notes", age=timedelta(0), window_title="", url=None):
        return ClipItem(
            content=content,
            content_type=detect_content_type(content),
            timestamp=NOW - age,
            context=ClipContext(app_name=app_name, window_title=window_title, url=url),
        )

    return _make


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
