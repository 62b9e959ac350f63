"""
Refresh orchestration for lipu.

This module coordinates one refresh cycle:
1. Fetch every subscribed feed, one at a time and in order
2. Classify entries (inside the fetcher), dropping entries that fail
3. Merge viewing progress from the previous snapshot, once, across all feeds
4. Sort the result by recency, newest first

A feed that fails is logged and skipped; refresh itself never fails.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from datetime import datetime, timezone
import logging
from typing import Iterable, Sequence

import httpx

from .config import FetchConfig
from .core.errors import FeedError
from .core.merge import merge_progress
from .core.types import Article
from .fetch.fetcher import build_client, fetch_articles
from .utils.logging import get_logger, log_event

# Sort key for articles that carry neither a created nor an updated timestamp
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


async def refresh(
    feed_urls: Sequence[str],
    previous: Sequence[Article] | None = None,
    client: httpx.AsyncClient | None = None,
    fetch_cfg: FetchConfig | None = None,
    logger: logging.Logger | None = None,
) -> list[Article]:
    """Fetch, classify, merge and sort articles from all feeds.

    Args:
        feed_urls: Feed URLs, fetched sequentially in this order
        previous: Last known article snapshot whose progress is carried over
        client: Optional HTTP client; one is created (and closed) when omitted
        fetch_cfg: Fetch settings used for every feed
        logger: Logger for events, defaults to the package logger

    Returns:
        Articles from all feeds that could be fetched, newest first
    """
    fetch_cfg = fetch_cfg or FetchConfig()
    logger = logger or get_logger()

    if client is None:
        async with build_client(fetch_cfg) as owned:
            return await refresh(feed_urls, previous, owned, fetch_cfg, logger)

    log_event(logger, "Refresh start", event="refresh_start", feeds=len(feed_urls))

    collected: list[Article] = []
    failed = 0
    for url in feed_urls:
        try:
            articles = await fetch_articles(url, client, fetch_cfg, logger)
        except FeedError as exc:
            failed += 1
            log_event(
                logger,
                f"Feed failed: {exc}",
                level=logging.WARNING,
                event="feed_failed",
                feed_url=url,
                error_kind=exc.kind,
                reason=exc.reason,
            )
            continue
        collected.extend(articles)

    merged = merge_progress(collected, previous)
    ordered = sort_by_recency(merged)

    log_event(
        logger,
        "Refresh done",
        event="refresh_done",
        feeds=len(feed_urls),
        failed_feeds=failed,
        articles=len(ordered),
    )
    return ordered


def sort_by_recency(articles: Iterable[Article]) -> list[Article]:
    """Sort articles newest first.

    The key is ``created``, else ``updated``, else the epoch. The sort is
    stable, so articles with equal keys keep their input order.
    """
    return sorted(articles, key=recency_key, reverse=True)


def recency_key(article: Article) -> datetime:
    stamp = article.created or article.updated or EPOCH
    if stamp.tzinfo is None:
        # Naive timestamps are taken as UTC so they compare with aware ones
        return stamp.replace(tzinfo=timezone.utc)
    return stamp


@dataclass(frozen=True)
class Subscriptions:
    """Immutable refresh configuration.

    Each ``with_*`` call returns a new value; refreshing never changes the
    instance it was called on.

    Attributes:
        feeds: Feed URLs in refresh order
        previous: Snapshot used to carry progress forward, if any
    """

    feeds: tuple[str, ...] = ()
    previous: tuple[Article, ...] | None = None

    def with_feed(self, url: str) -> Subscriptions:
        return replace(self, feeds=self.feeds + (url,))

    def with_previous(self, articles: Iterable[Article] | None) -> Subscriptions:
        return replace(self, previous=tuple(articles) if articles is not None else None)

    async def refresh(
        self,
        client: httpx.AsyncClient | None = None,
        fetch_cfg: FetchConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> list[Article]:
        return await refresh(self.feeds, self.previous, client, fetch_cfg, logger)

    def refresh_sync(
        self,
        fetch_cfg: FetchConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> list[Article]:
        """Run ``refresh`` on a fresh event loop, for synchronous callers."""
        return asyncio.run(self.refresh(fetch_cfg=fetch_cfg, logger=logger))
