"""
Error types for lipu.

Two independent failure domains:
- FeedError: a whole feed could not be fetched, decoded or parsed
- EntryError: a single entry could not be classified into an Article
"""

from __future__ import annotations


class LipuError(Exception):
    """Base class for all lipu errors."""


class FeedError(LipuError):
    """A feed contributed nothing to a refresh.

    Attributes:
        url: The feed URL
        reason: Human-readable cause
    """

    kind = "feed"

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class NetworkError(FeedError):
    kind = "network"


class ResponseProcessingError(FeedError):
    kind = "response_processing"


class FeedParsingError(FeedError):
    kind = "feed_parsing"


class EntryError(LipuError):
    """An entry could not be turned into an Article."""

    kind = "entry"
    default_reason = "entry could not be classified"

    def __init__(self, reason: str | None = None):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class EmptyBodyError(EntryError):
    kind = "empty_body"
    default_reason = "entry has no media, content or summary"


class EmptyContentError(EntryError):
    kind = "empty_content"
    default_reason = "first media group has no content items"


class MissingDownloadUrlError(EntryError):
    kind = "missing_download_url"
    default_reason = "media content has no URL"


class UnknownMimeTypeError(EntryError):
    kind = "unknown_mime_type"
    default_reason = "media content has no recognized mime type"
