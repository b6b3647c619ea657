"""Validated RSS feed assembly and rendering."""

from .dates import normalize_date
from .elements import CHANNEL_ELEMENTS, ITEM_ELEMENTS, MANDATORY_CHANNEL_ELEMENTS
from .errors import (
    FeedError,
    FeedStateError,
    InvalidDateError,
    MissingFieldError,
    MissingMandatoryPropertyError,
    UnknownElementError,
)
from .feed import Feed, FeedState
from .hooks import HookList
from .models import RenderedFeed
from .pipeline import ItemPipeline
from .properties import PropertyStore
from .renderer import render_rss, render_rss_bytes

__all__ = [
    "CHANNEL_ELEMENTS",
    "ITEM_ELEMENTS",
    "MANDATORY_CHANNEL_ELEMENTS",
    "Feed",
    "FeedError",
    "FeedState",
    "FeedStateError",
    "HookList",
    "InvalidDateError",
    "ItemPipeline",
    "MissingFieldError",
    "MissingMandatoryPropertyError",
    "PropertyStore",
    "RenderedFeed",
    "UnknownElementError",
    "normalize_date",
    "render_rss",
    "render_rss_bytes",
]
