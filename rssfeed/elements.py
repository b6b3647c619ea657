"""Element names allowed in an RSS channel and its items.

The tuples are ordered: renderers emit elements in exactly this order.
"""

CHANNEL_ELEMENTS = (
    "title",
    "link",
    "description",
    "language",
    "copyright",
    "skipDays",
    "managingEditor",
    "webMaster",
    "pubDate",
    "lastBuildDate",
    "category",
    "generator",
    "docs",
    "ttl",
    "image",
    "rating",
    "textInput",
    "skipHours",
)

ITEM_ELEMENTS = (
    "title",
    "link",
    "description",
    "author",
    "category",
    "comments",
    "enclosure",
    "guid",
    "pubDate",
    "source",
)

MANDATORY_CHANNEL_ELEMENTS = ("title", "description", "link")

# Channel properties stored as RFC-822 dates
DATE_CHANNEL_ELEMENTS = ("pubDate", "lastBuildDate")
