"""Pydantic models for assembled feeds."""

from pydantic import BaseModel, ConfigDict


class RenderedFeed(BaseModel):
    """A finalized feed handed to a renderer.

    ``properties`` holds only the channel elements that were set and
    ``items`` the accepted items in insertion order.
    """

    model_config = ConfigDict(frozen=True)

    properties: dict[str, str]
    items: list[dict[str, str]]
