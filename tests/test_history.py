"""Tests for the bounded clipboard history."""

from datetime import timedelta

import pytest

from contextclip.core.clipboard import ClipboardHistory, ClipItem, ContentType

from .conftest import NOW


class TestInsert:
    def test_newest_first(self, history, make_item):
        first = make_item("first")
        second = make_item("second")
        history.insert(first)
        history.insert(second)
        assert history.snapshot() == [second, first]

    def test_capacity_evicts_oldest(self, history, make_item):
        items = [make_item(f"item {i}", age=timedelta(seconds=101 - i)) for i in range(101)]
        evicted = []
        for item in items:
            evicted.append(history.insert(item))

        assert len(history) == 100
        assert evicted[:100] == [None] * 100
        assert evicted[100] is items[0]
        assert items[0] not in history.snapshot()
        assert history.snapshot() == list(reversed(items[1:]))

    def test_small_capacity(self, make_item):
        history = ClipboardHistory(max_size=2)
        for content in ("a", "b", "c"):
            history.insert(make_item(content))
        assert [item.content for item in history] == ["c", "b"]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ClipboardHistory(max_size=0)

    def test_history_does_not_dedupe(self, history, make_item):
        history.insert(make_item("same"))
        history.insert(make_item("same"))
        assert history.size == 2


class TestListRecent:
    def test_returns_first_n(self, history, make_item):
        for content in ("a", "b", "c"):
            history.insert(make_item(content))
        assert [item.content for item in history.list_recent(2)] == ["c", "b"]

    def test_fewer_than_requested(self, history, make_item):
        history.insert(make_item("only"))
        assert len(history.list_recent(10)) == 1

    def test_zero_or_negative(self, history, make_item):
        history.insert(make_item("only"))
        assert history.list_recent(0) == []
        assert history.list_recent(-3) == []

    def test_does_not_mutate(self, history, make_item):
        for content in ("a", "b"):
            history.insert(make_item(content))
        recent = history.list_recent(2)
        recent.clear()
        assert history.size == 2

    def test_snapshot_is_stable_across_inserts(self, history, make_item):
        history.insert(make_item("a"))
        snapshot = history.snapshot()
        history.insert(make_item("b"))
        assert [item.content for item in snapshot] == ["a"]


class TestFindByIdPrefix:
    def test_finds_by_prefix(self, history, make_item):
        item = make_item("target")
        history.insert(item)
        history.insert(make_item("other"))
        assert history.find_by_id_prefix(item.id[:8]) is item

    def test_prefix_is_case_sensitive(self, history):
        item = ClipItem(content="x", content_type=ContentType.TEXT, timestamp=NOW, id="abcdef-1")
        history.insert(item)
        assert history.find_by_id_prefix("abc") is item
        assert history.find_by_id_prefix("ABC") is None

    def test_first_match_is_newest(self, history):
        older = ClipItem(content="a", content_type=ContentType.TEXT, timestamp=NOW, id="ab-1")
        newer = ClipItem(content="b", content_type=ContentType.TEXT, timestamp=NOW, id="ab-2")
        history.insert(older)
        history.insert(newer)
        assert history.find_by_id_prefix("ab") is newer

    def test_empty_prefix(self, history, make_item):
        history.insert(make_item("target"))
        assert history.find_by_id_prefix("") is None

    def test_limit(self, history, make_item):
        old = make_item("old")
        history.insert(old)
        history.insert(make_item("new"))
        assert history.find_by_id_prefix(old.id, limit=1) is None
        assert history.find_by_id_prefix(old.id, limit=2) is old

    def test_clear(self, history, make_item):
        history.insert(make_item("a"))
        history.clear()
        assert len(history) == 0
