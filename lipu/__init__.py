"""
lipu - a feed reader core.

This package fetches RSS, Atom and JSON feeds, classifies every entry into a
typed Article (text, audio, video or a hosted video link), carries viewing
progress over from the previous refresh and returns one list of articles
ordered newest first.

Main entry point is the CLI via `lipu refresh` command.

Example:
    $ lipu refresh -f https://example.com/podcast.xml
"""

__all__ = [
    "__version__",
    "Article",
    "Subscriptions",
    "classify_entry",
    "merge_progress",
    "refresh",
    "sort_by_recency",
]
__version__ = "0.1.0"

from .core.classify import classify_entry
from .core.merge import merge_progress
from .core.types import Article
from .runner import Subscriptions, refresh, sort_by_recency
