"""Tests for ContextClipService wiring, copy and search."""

import pytest

from contextclip.core.clipboard import ClipboardMonitor, SystemClipboard
from contextclip.core.context import StaticContextProvider, UnknownContextProvider
from contextclip.core.exceptions import ClipboardWriteError, ItemNotFoundError
from contextclip.services import ContextClipService
from contextclip.utils import ConfigManager


@pytest.fixture
def config(tmp_path) -> ConfigManager:
    return ConfigManager(str(tmp_path / "settings.yaml"))


@pytest.fixture
def service(config, provider, clipboard, clock) -> ContextClipService:
    return ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)


def capture(service, clipboard, *contents):
    for content in contents:
        clipboard.content = content
        service.monitor.check_clipboard()


class TestCreate:
    def test_uses_config(self, config, provider, clipboard, clock):
        config.set("clipboard.check_interval", 250)
        service = ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)

        assert service.history.max_size == 100
        assert isinstance(service.monitor, ClipboardMonitor)
        assert service.monitor.check_interval == 0.25
        assert service.monitor.context_provider is provider

    def test_default_collaborators(self, config):
        config.set("context.enabled", False)
        service = ContextClipService.create(config)

        assert isinstance(service.monitor.context_provider, UnknownContextProvider)
        assert isinstance(service.clipboard, SystemClipboard)

    def test_instances_are_independent(self, config, provider, clipboard, clock):
        first = ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)
        second = ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)
        capture(first, clipboard, "only in first")
        assert second.history.size == 0


class TestCopy:
    def test_round_trip(self, service, clipboard):
        capture(service, clipboard, "first value", "second value")
        target = service.list_recent(2)[1]

        copied = service.copy_item(target.id[:8])

        assert copied is target
        assert clipboard.read() == "first value"

    def test_content_verbatim(self, service, clipboard):
        capture(service, clipboard, "  spaced\n\ttext  ")
        item = service.list_recent(1)[0]
        clipboard.content = "something else"

        service.copy_item(item.id)

        assert clipboard.read() == "  spaced\n\ttext  "

    def test_not_found(self, service, clipboard):
        capture(service, clipboard, "value")
        with pytest.raises(ItemNotFoundError) as exc_info:
            service.copy_item("no-such-id")
        assert exc_info.value.prefix == "no-such-id"
        assert clipboard.read() == "value"

    def test_write_failure(self, service, clipboard):
        capture(service, clipboard, "value")
        clipboard.fail_writes = True
        with pytest.raises(ClipboardWriteError):
            service.copy_item(service.list_recent(1)[0].id)

    def test_copied_value_recaptured_as_new_item(self, service, clipboard):
        capture(service, clipboard, "a", "b")
        service.copy_item(service.list_recent(2)[1].id)

        service.monitor.check_clipboard()

        assert [item.content for item in service.list_recent(10)] == ["a", "b", "a"]

    def test_logs_copy(self, service, clipboard, log_messages):
        capture(service, clipboard, "value")
        service.copy_item(service.list_recent(1)[0].id)
        assert "Copied: value..." in log_messages


class TestQueries:
    def test_search_uses_context(self, service, clipboard):
        capture(service, clipboard, "hello")
        assert len(service.search("from safari")) == 1
        assert service.search("from notes") == []

    def test_degraded_context(self, config, clipboard, clock, safari_context):
        provider = StaticContextProvider(safari_context, url_fails=True)
        service = ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)
        capture(service, clipboard, "quote")

        item = service.list_recent(1)[0]
        assert item.context.app_name == "Safari"
        assert item.context.url is None

    def test_bounded_history(self, service, clipboard):
        capture(service, clipboard, *[f"item {i}" for i in range(101)])
        items = service.list_recent(200)
        assert len(items) == 100
        assert items[0].content == "item 100"
        assert items[-1].content == "item 1"

    def test_duplicate_capture(self, service, clipboard):
        capture(service, clipboard, "same", "same")
        assert len(service.list_recent(10)) == 1


class TestLifecycle:
    def test_start_stop(self, config, provider, clipboard, clock):
        config.set("clipboard.check_interval", 60000)
        service = ContextClipService.create(config, context_provider=provider, clipboard=clipboard, clock=clock)
        service.start()
        assert service.monitor.is_running
        service.stop()
        assert not service.monitor.is_running

    def test_stop_before_start(self, service):
        service.stop()
        assert not service.monitor.is_running
