"""
Core data types for lipu.

This module defines the fundamental data structures used throughout the pipeline:
- FeedEntry: Raw entry data produced by the feed parser, before classification
- Article: A classified entry with a typed body and viewing progress
- Text / Audio / Video / YouTubeLink: The possible article bodies
- Unseen / UntilParagraph / UntilSecond / Fully: Viewing progress states
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

PLACEHOLDER_TITLE = "??"


@dataclass(frozen=True)
class Unseen:
    """The article has not been opened yet."""


@dataclass(frozen=True)
class UntilParagraph:
    """Text was read up to (and including) paragraph ``n``."""

    n: int


@dataclass(frozen=True)
class UntilSecond:
    """Audio or video was played up to second ``n``."""

    n: int


@dataclass(frozen=True)
class Fully:
    """The article was read or played to the end."""


Progress = Union[Unseen, UntilParagraph, UntilSecond, Fully]


@dataclass
class MediaLink:
    """A remote media attachment.

    Attributes:
        url: Where the media can be downloaded from
        mime_type: The attachment's mime type, e.g. "audio/mpeg"
        downloaded: Whether a local copy exists; classification never sets it
    """
    url: str
    mime_type: str
    downloaded: bool = False


@dataclass(frozen=True)
class Text:
    content: str

    kind = "article"


@dataclass(frozen=True)
class Audio:
    media: MediaLink

    kind = "audio"


@dataclass(frozen=True)
class Video:
    media: MediaLink

    kind = "video"


@dataclass(frozen=True)
class YouTubeLink:
    url: str

    kind = "youtube video"


ArticleBody = Union[Text, Audio, Video, YouTubeLink]


@dataclass
class MediaContent:
    """One content item inside a media group. Both fields may be missing."""
    url: str | None = None
    mime_type: str | None = None


@dataclass
class MediaGroup:
    contents: list[MediaContent] = field(default_factory=list)


@dataclass
class FeedEntry:
    """Represents one raw entry from a parsed feed.

    Attributes:
        id: Stable identifier of the entry within its feed
        title: Optional entry title
        content: Optional primary content (HTML or text)
        summary: Optional short summary
        media: Attached media groups, in document order
        authors: Contributor names, in document order
        published: Optional publication timestamp (UTC)
        updated: Optional last-update timestamp (UTC)
        link: Optional link to the entry's web page
    """
    id: str
    title: str | None = None
    content: str | None = None
    summary: str | None = None
    media: list[MediaGroup] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    published: datetime | None = None
    updated: datetime | None = None
    link: str | None = None


@dataclass
class Article:
    """Represents one classified syndication entry.

    Articles are rebuilt on every refresh; only ``viewed`` is carried over
    from a previous snapshot, matched on ``id``.

    Attributes:
        id: Stable identifier from the source feed, the merge key
        name: Display title, "??" when the feed gave none
        body: Exactly one body variant
        author: Contributor names joined with ", ", or None
        description: Optional summary, independent of the body
        created: Optional publication timestamp
        updated: Optional last-update timestamp
        viewed: Viewing progress, Unseen after classification
        link: Optional link to the entry's web page
        feed_url: URL of the feed the article came from
    """
    id: str
    name: str
    body: ArticleBody
    author: str | None = None
    description: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    viewed: Progress = field(default_factory=Unseen)
    link: str | None = None
    feed_url: str | None = None
