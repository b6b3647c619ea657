"""Per-item normalization and validation run before an item joins a feed."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from rssfeed.dates import normalize_date
from rssfeed.elements import ITEM_ELEMENTS
from rssfeed.errors import MissingFieldError, UnknownElementError
from rssfeed.hooks import HookList

logger = logging.getLogger(__name__)


def _empty(item: Mapping[str, Any], key: str) -> bool:
    return not item.get(key)


class ItemPipeline:
    """Runs the prepare and check hook stages over each incoming item.

    ``on_prepare_item`` starts empty and is meant for application
    defaulting. ``on_check_item`` is seeded with :meth:`check_item` followed
    by :meth:`clean_item`; extra checks are appended after them.
    """

    def __init__(self, elements: Iterable[str] = ITEM_ELEMENTS):
        self.elements = tuple(dict.fromkeys(elements))
        self.on_prepare_item = HookList("onPrepareItem")
        self.on_check_item = HookList("onCheckItem")
        self.reset_check_hooks()

    def reset_check_hooks(self) -> None:
        """Restore the built-in check hooks, dropping any others."""
        self.on_check_item.replace([self.check_item, self.clean_item])

    def check_item(self, item: dict[str, Any]) -> None:
        """Reject items without title/description or with unknown elements."""
        if _empty(item, "title") and _empty(item, "description"):
            raise MissingFieldError(("title", "description"))

        for key in item:
            if key not in self.elements:
                raise UnknownElementError(key)

    def clean_item(self, item: dict[str, Any]) -> None:
        """Fill guid and link from each other and normalize pubDate."""
        if _empty(item, "guid") and item.get("link") is not None:
            item["guid"] = item["link"]
        elif _empty(item, "link") and item.get("guid") is not None:
            item["link"] = item["guid"]

        if item.get("pubDate") is not None:
            item["pubDate"] = normalize_date(item["pubDate"])

    def accept(self, raw: Mapping[str, Any]) -> dict[str, str]:
        """Run every hook over a copy of ``raw`` and return the result.

        The caller's mapping is never modified. Entries left as ``None`` are
        dropped and the remaining values are converted to strings.

        Raises:
            FeedError: Whatever the first failing hook raised
        """
        item = dict(raw)

        self.on_prepare_item(item)
        self.on_check_item(item)

        accepted = {key: str(value) for key, value in item.items() if value is not None}
        logger.debug(f"Accepted item: {accepted.get('guid') or accepted.get('title')}")
        return accepted
