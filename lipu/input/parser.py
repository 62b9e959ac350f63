"""
RSS/Atom/JSON Feed parser.

Parses feed documents with feedparser and maps each entry onto a FeedEntry:
- id: entry id, else its link, else a hash of title and summary
- content: the first content block, summary: the summary/description
- media: one group for media:content (or an empty group when only
  media:thumbnail is present), then one group per enclosure
- authors: every author name, published/updated: UTC datetimes
"""

from __future__ import annotations

from datetime import datetime, timezone
import hashlib
import logging
from typing import Any

import feedparser

from ..core.errors import FeedParsingError
from ..core.types import FeedEntry, MediaContent, MediaGroup

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/xml"


def parse_feed(text: str, url: str = "", content_type: str | None = None) -> list[FeedEntry]:
    """Parse a decoded feed document into entries.

    The text is re-encoded as UTF-8 and handed to feedparser as bytes, so
    feedparser never treats it as a URL or file name to open.

    Args:
        text: The decoded feed document
        url: Feed URL, used for error messages
        content_type: Mime type from the HTTP response; "json" in it selects
                      the JSON Feed parser

    Returns:
        Entries in document order

    Raises:
        FeedParsingError: If the document is malformed and yielded no entries
    """
    mime = (content_type or DEFAULT_CONTENT_TYPE).split(";", 1)[0].strip()
    # No content-location: feedparser would resolve bare guids against it
    headers = {"content-type": f"{mime}; charset=utf-8"}
    data = feedparser.parse(text.encode("utf-8"), response_headers=headers)

    entries = data.get("entries", [])
    if data.get("bozo", False) and not entries:
        raise FeedParsingError(url, f"Failed to parse feed: {data.get('bozo_exception', 'Unknown error')}")
    if data.get("bozo", False):
        logger.debug("Feed %s parsed with recoverable errors: %s", url, data.get("bozo_exception"))

    return [parse_entry(entry) for entry in entries]


def parse_entry(data: dict[str, Any]) -> FeedEntry:
    """Map a single feedparser entry onto a FeedEntry."""
    return FeedEntry(
        id=data.get("id") or data.get("link") or _fallback_id(data),
        title=data.get("title"),
        content=_content_value(data.get("content")),
        summary=data.get("summary"),
        media=_media_groups(data),
        authors=_author_names(data),
        published=_to_datetime(data.get("published_parsed")),
        updated=_to_datetime(data.get("updated_parsed")),
        link=data.get("link"),
    )


def _content_value(content: Any) -> str | None:
    # XML feeds give a list of content blocks, JSON Feed a single block
    if isinstance(content, list):
        return content[0].get("value") if content else None
    if isinstance(content, dict):
        return content.get("value")
    return None


def _media_groups(data: dict[str, Any]) -> list[MediaGroup]:
    groups: list[MediaGroup] = []

    media_content = data.get("media_content") or []
    if media_content:
        groups.append(
            MediaGroup(
                contents=[
                    MediaContent(url=item.get("url") or None, mime_type=item.get("type") or None)
                    for item in media_content
                ]
            )
        )
    elif data.get("media_thumbnail"):
        # A media group that only carries thumbnails has no playable content
        groups.append(MediaGroup())

    for enclosure in data.get("enclosures") or []:
        groups.append(
            MediaGroup(
                contents=[
                    MediaContent(
                        url=enclosure.get("href") or None,
                        mime_type=enclosure.get("type") or None,
                    )
                ]
            )
        )
    return groups


def _author_names(data: dict[str, Any]) -> list[str]:
    names = [author.get("name") for author in data.get("authors") or []]
    names = [name for name in names if name]
    if not names and data.get("author"):
        names = [data["author"]]
    return names


def _to_datetime(parsed: Any) -> datetime | None:
    if not parsed:
        return None
    try:
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


def _fallback_id(data: dict[str, Any]) -> str:
    seed = f"{data.get('title', '')}\n{data.get('summary', '')}"
    return hashlib.sha256(seed.encode("utf-8")).hexdigest()
