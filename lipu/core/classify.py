"""
Entry classification.

Turns a raw FeedEntry into an Article with exactly one typed body:
- no attached media: Text from the entry content, else its summary
- attached media: YouTubeLink, Video or Audio chosen from the mime type of the
  first content item of the first media group

Any other shape raises an EntryError subclass; there is no best-guess fallback.
"""

from __future__ import annotations

from .errors import (
    EmptyBodyError,
    EmptyContentError,
    MissingDownloadUrlError,
    UnknownMimeTypeError,
)
from .types import (
    PLACEHOLDER_TITLE,
    Article,
    ArticleBody,
    Audio,
    FeedEntry,
    MediaLink,
    Text,
    Unseen,
    Video,
    YouTubeLink,
)

AUTHOR_SEPARATOR = ", "


def classify_entry(entry: FeedEntry, feed_url: str | None = None) -> Article:
    """Classify a parsed feed entry into an Article.

    Args:
        entry: The raw entry from the feed parser
        feed_url: Optional URL of the feed the entry came from

    Returns:
        A new Article with ``viewed`` set to Unseen

    Raises:
        EmptyBodyError: No media and neither content nor summary
        EmptyContentError: The first media group has no content items
        MissingDownloadUrlError: The chosen media content has no URL
        UnknownMimeTypeError: The mime type is missing or not audio/video/flash
    """
    if entry.media:
        body = _media_body(entry)
    else:
        body = _text_body(entry)

    return Article(
        id=entry.id,
        name=entry.title if entry.title is not None else PLACEHOLDER_TITLE,
        body=body,
        author=AUTHOR_SEPARATOR.join(entry.authors) if entry.authors else None,
        description=entry.summary,
        created=entry.published,
        updated=entry.updated,
        viewed=Unseen(),
        link=entry.link,
        feed_url=feed_url,
    )


def _text_body(entry: FeedEntry) -> Text:
    if entry.content is not None:
        return Text(entry.content)
    if entry.summary is not None:
        return Text(entry.summary)
    raise EmptyBodyError()


def _media_body(entry: FeedEntry) -> ArticleBody:
    # Feeds in the wild attach a single media item; later groups are ignored.
    group = entry.media[0]
    if not group.contents:
        raise EmptyContentError()
    content = group.contents[0]

    if not content.url:
        raise MissingDownloadUrlError()
    if not content.mime_type:
        raise UnknownMimeTypeError()

    media = MediaLink(url=content.url, mime_type=content.mime_type, downloaded=False)
    return _body_for_mime(media)


def _body_for_mime(media: MediaLink) -> ArticleBody:
    """Map a mime type onto a body variant.

    Matching is on the ``type/subtype`` split, in this order:
    application/x-shockwave-flash, video/*, audio/*.
    """
    major, sep, minor = media.mime_type.partition("/")
    if not sep:
        raise UnknownMimeTypeError(f"malformed mime type: {media.mime_type!r}")

    if (major, minor) == ("application", "x-shockwave-flash"):
        return YouTubeLink(media.url)
    if major == "video":
        return Video(media)
    if major == "audio":
        return Audio(media)
    raise UnknownMimeTypeError(f"unsupported mime type: {media.mime_type!r}")
