"""
Core domain models and business logic.

This package contains the data model, error types, entry classification and
progress merging. Nothing here performs I/O.
"""

from .classify import classify_entry
from .errors import (
    EmptyBodyError,
    EmptyContentError,
    EntryError,
    FeedError,
    FeedParsingError,
    LipuError,
    MissingDownloadUrlError,
    NetworkError,
    ResponseProcessingError,
    UnknownMimeTypeError,
)
from .merge import merge_progress
from .types import (
    Article,
    ArticleBody,
    Audio,
    FeedEntry,
    Fully,
    MediaContent,
    MediaGroup,
    MediaLink,
    Progress,
    Text,
    Unseen,
    UntilParagraph,
    UntilSecond,
    Video,
    YouTubeLink,
)

__all__ = [
    "Article",
    "ArticleBody",
    "Audio",
    "FeedEntry",
    "Fully",
    "MediaContent",
    "MediaGroup",
    "MediaLink",
    "Progress",
    "Text",
    "Unseen",
    "UntilParagraph",
    "UntilSecond",
    "Video",
    "YouTubeLink",
    "classify_entry",
    "merge_progress",
    "LipuError",
    "FeedError",
    "NetworkError",
    "ResponseProcessingError",
    "FeedParsingError",
    "EntryError",
    "EmptyBodyError",
    "EmptyContentError",
    "MissingDownloadUrlError",
    "UnknownMimeTypeError",
]
