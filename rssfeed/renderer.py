"""RSS 2.0 XML rendering of assembled feeds."""

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping

from rssfeed.config import get_settings
from rssfeed.elements import CHANNEL_ELEMENTS, ITEM_ELEMENTS

from .models import RenderedFeed

RSS_VERSION = "2.0"


def ordered_keys(mapping: Mapping[str, str], order: Iterable[str]) -> list[str]:
    """Keys of ``mapping`` in ``order``, followed by any others as inserted."""
    order = tuple(order)
    known = [key for key in order if key in mapping]
    extra = [key for key in mapping if key not in order]
    return known + extra


def _append(parent: ET.Element, values: Mapping[str, str], order: Iterable[str]) -> None:
    for key in ordered_keys(values, order):
        ET.SubElement(parent, key).text = values[key]


def build_tree(feed: RenderedFeed) -> ET.Element:
    """Build the ``<rss>`` element tree for a feed."""
    root = ET.Element("rss", version=RSS_VERSION)
    channel = ET.SubElement(root, "channel")

    _append(channel, feed.properties, CHANNEL_ELEMENTS)
    for item in feed.items:
        _append(ET.SubElement(channel, "item"), item, ITEM_ELEMENTS)

    return root


def render_rss(
    feed: RenderedFeed,
    pretty: bool | None = None,
    encoding: str | None = None,
) -> str:
    """
    Serialize an assembled feed as an RSS 2.0 document.

    Channel elements and item elements are written in the fixed RSS order;
    text content is XML-escaped by ElementTree.

    Args:
        feed: The finalized feed
        pretty: Indent the output (defaults to the ``pretty_xml`` setting)
        encoding: Encoding named in the XML declaration (defaults to the
            ``xml_encoding`` setting)

    Returns:
        The XML document as text
    """
    settings = get_settings()
    if pretty is None:
        pretty = settings.pretty_xml
    if encoding is None:
        encoding = settings.xml_encoding

    root = build_tree(feed)
    if pretty:
        ET.indent(root, space="  ")

    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="{encoding}"?>\n{body}\n'


def render_rss_bytes(
    feed: RenderedFeed,
    pretty: bool | None = None,
    encoding: str | None = None,
) -> bytes:
    """
    Serialize an assembled feed as bytes in the declared encoding.

    Characters the encoding cannot represent are written as numeric
    character references, so the document always matches its declaration.
    """
    if encoding is None:
        encoding = get_settings().xml_encoding
    xml = render_rss(feed, pretty=pretty, encoding=encoding)
    return xml.encode(encoding, errors="xmlcharrefreplace")
