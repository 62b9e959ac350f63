"""
Feed fetching.

This module provides the two halves of fetching one feed:
1. Transport: download the feed document with httpx, retrying transient
   failures, and decode it to text
2. FeedFetcher: parse the document and classify every entry, dropping (and
   logging) entries that cannot be classified

Feed-level failures surface as FeedError subclasses; entry-level failures never
leave this module.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
import re

import httpx

from ..config import FetchConfig
from ..core.classify import classify_entry
from ..core.errors import EntryError, NetworkError, ResponseProcessingError
from ..core.types import Article
from ..input.parser import parse_feed
from ..utils.logging import get_logger, log_event

# Matches the encoding pseudo-attribute of an XML declaration
XML_ENCODING_RE = re.compile(rb"""^\s*<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z0-9._-]+)["']""")


@dataclass
class FetchResult:
    """Raw response of a successful feed download.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code of the final response
        content: The undecoded response body
        content_type: Mime type from the Content-Type header, if any
        encoding: Charset from the Content-Type header, if any
    """
    url: str
    status_code: int
    content: bytes
    content_type: str | None = None
    encoding: str | None = None


def build_client(cfg: FetchConfig) -> httpx.AsyncClient:
    """Create the HTTP client shared by the feeds of one refresh."""
    return httpx.AsyncClient(
        timeout=cfg.timeout_seconds,
        headers={"User-Agent": cfg.user_agent},
        follow_redirects=True,
        trust_env=cfg.trust_env,
    )


async def fetch_feed_bytes(url: str, client: httpx.AsyncClient, retries: int = 0) -> FetchResult:
    """Download a feed document.

    Transport exceptions are retried with linear backoff; a malformed URL or
    an HTTP error status is not retried.

    Args:
        url: The feed URL
        client: HTTP client to issue the request with
        retries: Number of retry attempts after the initial failure

    Returns:
        FetchResult with the raw body

    Raises:
        NetworkError: If the URL is malformed, every attempt failed or the
                      server answered >= 400
    """
    last_error: str | None = None

    for attempt in range(retries + 1):
        try:
            resp = await client.get(url)
        except httpx.InvalidURL as exc:
            # Not transient, retrying cannot help
            raise NetworkError(url, f"InvalidURL: {exc}") from exc
        except httpx.HTTPError as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            if attempt < retries:
                # Backoff: 0.5s, 1.0s, 1.5s...
                await asyncio.sleep(0.5 * (attempt + 1))
            continue

        if resp.status_code >= 400:
            raise NetworkError(url, f"HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type")
        return FetchResult(
            url=url,
            status_code=resp.status_code,
            content=resp.content,
            content_type=content_type.split(";", 1)[0].strip() if content_type else None,
            encoding=resp.charset_encoding,
        )

    raise NetworkError(url, last_error or "request failed")


def decode_body(result: FetchResult) -> str:
    """Decode a response body to text.

    The charset comes from the Content-Type header, else the XML declaration,
    else UTF-8.

    Raises:
        ResponseProcessingError: If the body is not valid in that charset
    """
    encoding = result.encoding
    if not encoding:
        match = XML_ENCODING_RE.match(result.content)
        encoding = match.group(1).decode("ascii") if match else "utf-8"
    try:
        text = result.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise ResponseProcessingError(result.url, f"{type(exc).__name__}: {exc}") from exc
    # Drop a byte order mark so the parser sees the document start
    return text.lstrip("\ufeff")


async def fetch_articles(
    url: str,
    client: httpx.AsyncClient | None = None,
    fetch_cfg: FetchConfig | None = None,
    logger: logging.Logger | None = None,
) -> list[Article]:
    """Fetch one feed and classify its entries.

    Entries that fail classification are logged and dropped; the feed still
    succeeds with whatever survived, possibly nothing.

    Args:
        url: The feed URL
        client: Optional HTTP client; a temporary one is created when omitted
        fetch_cfg: Fetch settings (timeouts, retries, user agent)
        logger: Logger for events, defaults to the package logger

    Returns:
        Classified articles in feed order

    Raises:
        NetworkError: The feed could not be downloaded
        ResponseProcessingError: The body could not be decoded to text
        FeedParsingError: The document is not a parseable feed
    """
    fetch_cfg = fetch_cfg or FetchConfig()
    logger = logger or get_logger()

    if client is None:
        async with build_client(fetch_cfg) as owned:
            return await fetch_articles(url, owned, fetch_cfg, logger)

    result = await fetch_feed_bytes(url, client, retries=fetch_cfg.retries)
    text = decode_body(result)
    entries = parse_feed(text, url=url, content_type=result.content_type)

    articles: list[Article] = []
    for entry in entries:
        try:
            articles.append(classify_entry(entry, feed_url=url))
        except EntryError as exc:
            log_event(
                logger,
                f"Skipping entry {entry.id}: {exc.reason}",
                level=logging.WARNING,
                event="entry_skipped",
                feed_url=url,
                entry_id=entry.id,
                error_kind=exc.kind,
                reason=exc.reason,
            )

    log_event(
        logger,
        "Feed fetched",
        event="feed_fetched",
        feed_url=url,
        entries=len(entries),
        articles=len(articles),
    )
    return articles
