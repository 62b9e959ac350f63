"""
Feed fetching.

This package handles HTTP download, decoding, and per-entry
classification of a single feed.
"""

from .fetcher import FetchResult, build_client, decode_body, fetch_articles, fetch_feed_bytes

__all__ = [
    "FetchResult",
    "build_client",
    "decode_body",
    "fetch_articles",
    "fetch_feed_bytes",
]
