"""FastAPI glue for serving feeds over HTTP."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from rssfeed.config import get_settings
from rssfeed.errors import FeedError
from rssfeed.feed import Feed

logger = logging.getLogger(__name__)

RSS_MEDIA_TYPE = "application/rss+xml"

health_router = APIRouter(tags=["health"])


@health_router.get("/healthz")
async def health_check():
    """
    Health check endpoint.

    Returns:
        A simple status object indicating the service is healthy
    """
    return {"ok": True}


class RssResponse(Response):
    """Response carrying an RSS document."""

    media_type = RSS_MEDIA_TYPE


def feed_router(path: str, build_feed: Callable[[], Feed], **route_kwargs) -> APIRouter:
    """
    Create a router serving a freshly built feed at ``path``.

    ``build_feed`` is called once per request and must return a new
    :class:`Feed`. The body is encoded with the ``xml_encoding`` setting,
    which is also named in the XML declaration and the Content-Type charset.
    Feeds that fail validation produce a 500 response and no partial
    document.

    Args:
        path: URL path of the feed
        build_feed: Factory returning the feed to render
        **route_kwargs: Extra keyword arguments for ``APIRouter.get``

    Returns:
        APIRouter with a single GET route
    """
    router = APIRouter(tags=["feed"])

    @router.get(path, response_class=RssResponse, **route_kwargs)
    def get_feed():
        encoding = get_settings().xml_encoding
        try:
            body = build_feed().render_bytes(encoding=encoding)
        except FeedError as e:
            logger.error(f"Failed to render feed at {path}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e)) from e
        return RssResponse(content=body, media_type=f"{RSS_MEDIA_TYPE}; charset={encoding}")

    return router
