"""Feed assembly: channel properties, accepted items and finalization."""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from rssfeed.config import get_settings
from rssfeed.elements import MANDATORY_CHANNEL_ELEMENTS
from rssfeed.errors import FeedStateError, MissingMandatoryPropertyError
from rssfeed.hooks import HookList
from rssfeed.pipeline import ItemPipeline
from rssfeed.properties import PropertyStore

from .models import RenderedFeed
from .renderer import render_rss, render_rss_bytes

logger = logging.getLogger(__name__)


class FeedState(str, Enum):
    """Lifecycle of a feed."""

    BUILDING = "building"
    FINALIZING = "finalizing"
    RENDERED = "rendered"
    FAILED = "failed"


class Feed:
    """
    An RSS channel and its items, assembled for a single render.

    While building, channel properties and items may be set, added and
    cleared in any order. :meth:`assemble` runs the ``on_prepare_properties``
    hooks, checks that title, description and link are set and returns the
    finalized :class:`RenderedFeed`. After that the feed is read-only.

    Calling :meth:`assemble` again re-runs the prepare-properties hooks and
    the mandatory check, so hooks with side effects run once per call.

    A feed is not thread-safe; build one per request.
    """

    def __init__(
        self,
        channel_elements: Iterable[str] | None = None,
        item_elements: Iterable[str] | None = None,
    ):
        settings = get_settings()
        if channel_elements is None:
            channel_elements = settings.channel_elements
        if item_elements is None:
            item_elements = settings.item_elements

        self._properties = PropertyStore(channel_elements)
        self._pipeline = ItemPipeline(item_elements)
        self._items: list[dict[str, str]] = []
        self._state = FeedState.BUILDING
        self.on_prepare_properties = HookList("onPrepareProperties")

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def pipeline(self) -> ItemPipeline:
        return self._pipeline

    @property
    def on_prepare_item(self) -> HookList:
        return self._pipeline.on_prepare_item

    @property
    def on_check_item(self) -> HookList:
        return self._pipeline.on_check_item

    def _ensure_building(self, operation: str) -> None:
        if self._state is not FeedState.BUILDING:
            raise FeedStateError(self._state.value, operation)

    # Channel properties

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only snapshot of the channel properties.

        Writes go through :meth:`set_channel_property` while building, or
        through the mapping handed to ``on_prepare_properties`` hooks.
        """
        return MappingProxyType(self._properties.as_dict())

    def set_channel_property(self, name: str, value: Any) -> None:
        """Set a channel property (see :meth:`PropertyStore.set`)."""
        self._ensure_building("set channel property")
        self._properties.set(name, value)

    def get_channel_property(self, name: str, default: Any = None) -> Any:
        return self._properties.get(name, default)

    # Items

    @property
    def items(self) -> list[dict[str, str]]:
        """Copies of the accepted items, in insertion order."""
        return [dict(item) for item in self._items]

    def add_item(self, item: Mapping[str, Any]) -> dict[str, str]:
        """
        Normalize and validate an item, then append it.

        Args:
            item: Mapping of item element names to values

        Returns:
            The item as stored in the feed

        Raises:
            FeedError: If a hook rejects the item; nothing is appended
        """
        self._ensure_building("add item")
        accepted = self._pipeline.accept(item)
        self._items.append(accepted)
        return dict(accepted)

    def add_items(self, items: Iterable[Mapping[str, Any]]) -> None:
        """Add items one by one; items before a failing one stay added."""
        for item in items:
            self.add_item(item)

    def set_items(self, items: Iterable[Mapping[str, Any]]) -> None:
        """Replace all items."""
        self.clear_items()
        self.add_items(items)

    def clear_items(self) -> None:
        self._ensure_building("clear items")
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    # Finalization

    def _missing_mandatory(self) -> list[str]:
        values = self._properties.as_dict()
        return [name for name in MANDATORY_CHANNEL_ELEMENTS if not values.get(name)]

    def assemble(self) -> RenderedFeed:
        """
        Finalize the channel and return the feed for rendering.

        Returns:
            RenderedFeed with the set properties and all accepted items

        Raises:
            MissingMandatoryPropertyError: If title, description or link is
                empty after the prepare-properties hooks ran
            FeedStateError: If an earlier finalization failed
        """
        if self._state is FeedState.FAILED:
            raise FeedStateError(self._state.value, "assemble")

        self._state = FeedState.FINALIZING
        try:
            self.on_prepare_properties(self._properties.all())
        except Exception:
            self._state = FeedState.FAILED
            raise

        missing = self._missing_mandatory()
        if missing:
            self._state = FeedState.FAILED
            logger.warning(f"Feed finalization failed, missing: {', '.join(missing)}")
            raise MissingMandatoryPropertyError(missing)

        self._state = FeedState.RENDERED
        logger.debug(f"Feed assembled with {len(self._items)} items")
        return RenderedFeed(properties=self._properties.as_dict(), items=self.items)

    def render(self, pretty: bool | None = None) -> str:
        """Assemble the feed and serialize it as RSS XML text.

        Encode the result with the encoding named in its declaration, or use
        :meth:`render_bytes`.
        """
        return render_rss(self.assemble(), pretty=pretty)

    def render_bytes(self, pretty: bool | None = None, encoding: str | None = None) -> bytes:
        """Assemble the feed and serialize it in the configured XML encoding."""
        return render_rss_bytes(self.assemble(), pretty=pretty, encoding=encoding)
