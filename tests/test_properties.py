"""Tests for the channel property store."""

import re
from datetime import datetime, timezone

import pytest

from rssfeed.elements import CHANNEL_ELEMENTS
from rssfeed.errors import InvalidDateError, UnknownElementError
from rssfeed.properties import PropertyStore

RFC822_GMT = re.compile(r"^\w{3}, \d{2} \w{3} \d{4} \d{2}:\d{2}:\d{2} GMT$")


@pytest.fixture
def store():
    return PropertyStore()


class TestSetGet:
    """Tests for set/get round trips."""

    @pytest.mark.parametrize("name", [n for n in CHANNEL_ELEMENTS if n not in ("pubDate", "lastBuildDate")])
    def test_round_trip(self, store, name):
        store.set(name, "value")
        assert store.get(name) == "value"

    def test_unset_returns_default(self, store):
        assert store.get("language") is None
        assert store.get("language", "") == ""

    def test_last_write_wins(self, store):
        store.set("title", "First")
        store.set("title", "Second")
        assert store.get("title") == "Second"
        assert len(store) == 1

    def test_non_string_values_are_stored_as_strings(self, store):
        store.set("ttl", 60)
        assert store.get("ttl") == "60"

    def test_none_unsets(self, store):
        store.set("title", "My Feed")
        store.set("title", None)
        assert "title" not in store
        assert store.get("title") is None

    @pytest.mark.parametrize("name", ["pubDate", "lastBuildDate"])
    def test_date_properties_are_normalized(self, store, name):
        store.set(name, datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        assert store.get(name) == "Mon, 15 Jan 2024 10:30:00 GMT"
        assert RFC822_GMT.match(store.get(name))

    def test_invalid_date_is_not_stored(self, store):
        with pytest.raises(InvalidDateError):
            store.set("pubDate", "garbage")
        assert "pubDate" not in store


class TestWhitelist:
    """Unknown element names are rejected."""

    @pytest.mark.parametrize("name", ["foo", "Title", "items", "atom:link", ""])
    def test_set_unknown(self, store, name):
        with pytest.raises(UnknownElementError) as exc_info:
            store.set(name, "x")
        assert exc_info.value.element == name
        assert len(store) == 0

    def test_get_unknown(self, store):
        with pytest.raises(UnknownElementError):
            store.get("foo")

    def test_item_access_unknown(self, store):
        with pytest.raises(UnknownElementError):
            store["foo"] = "x"
        with pytest.raises(UnknownElementError):
            store["foo"]
        with pytest.raises(UnknownElementError):
            del store["foo"]

    def test_custom_whitelist(self):
        store = PropertyStore(["title", "link", "description", "atom:link"])
        store.set("atom:link", "http://example.com/feed.xml")
        assert store.get("atom:link") == "http://example.com/feed.xml"
        with pytest.raises(UnknownElementError):
            store.set("language", "en")


class TestMappingView:
    """The store behaves as a validated mutable mapping."""

    def test_all_is_live(self, store):
        view = store.all()
        view["title"] = "Via hook"
        assert store.get("title") == "Via hook"

    def test_item_assignment_normalizes_dates(self, store):
        store["pubDate"] = "2024-01-15T10:30:00Z"
        assert store["pubDate"] == "Mon, 15 Jan 2024 10:30:00 GMT"

    def test_missing_known_name_raises_key_error(self, store):
        with pytest.raises(KeyError):
            store["title"]

    def test_delete(self, store):
        store["title"] = "x"
        del store["title"]
        assert len(store) == 0

    def test_as_dict_uses_whitelist_order(self, store):
        store.set("language", "en")
        store.set("link", "http://example.com")
        store.set("title", "My Feed")
        assert list(store.as_dict()) == ["title", "link", "language"]

    def test_as_dict_is_a_copy(self, store):
        store.set("title", "My Feed")
        snapshot = store.as_dict()
        snapshot["title"] = "Changed"
        assert store.get("title") == "My Feed"

    def test_update(self, store):
        store.update({"title": "My Feed", "ttl": 30})
        assert dict(store) == {"title": "My Feed", "ttl": "30"}
