"""Example host application serving an RSS feed built with rssfeed."""

from datetime import datetime, timezone

from fastapi import FastAPI

from rssfeed import Feed
from rssfeed.logging import setup_logging
from rssfeed.web import feed_router, health_router


def build_example_feed() -> Feed:
    """Build the demo feed served at ``/feed.xml``."""
    feed = Feed()
    feed.set_channel_property("title", "rssfeed example")
    feed.set_channel_property("description", "Items published by the example application")
    feed.set_channel_property("link", "http://localhost:8000/")
    feed.set_channel_property("language", "en")

    @feed.on_prepare_properties.register
    def stamp_build_date(properties):
        properties["lastBuildDate"] = datetime.now(timezone.utc)

    @feed.on_prepare_item.register
    def default_author(item):
        item.setdefault("author", "editor@example.com (Editor)")

    feed.add_items(
        [
            {
                "title": "Hello, feed",
                "link": "http://localhost:8000/posts/1",
                "description": "The first post.",
                "pubDate": "2024-01-15T10:30:00+00:00",
            },
            {
                "description": "A note without a title or link.",
                "pubDate": datetime(2024, 1, 16, 8, 0, tzinfo=timezone.utc),
            },
        ]
    )
    return feed


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="rssfeed example",
        description="Serves an RSS feed assembled with rssfeed",
        version="1.0.0",
    )

    app.include_router(health_router)
    app.include_router(feed_router("/feed.xml", build_example_feed))

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
