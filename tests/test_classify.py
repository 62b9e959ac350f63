"""Tests for entry classification."""

from datetime import datetime, timezone

import pytest

from lipu.core.classify import classify_entry
from lipu.core.errors import (
    EmptyBodyError,
    EmptyContentError,
    EntryError,
    MissingDownloadUrlError,
    UnknownMimeTypeError,
)
from lipu.core.types import (
    Audio,
    FeedEntry,
    MediaContent,
    MediaGroup,
    MediaLink,
    Text,
    Unseen,
    Video,
    YouTubeLink,
)


def _media_entry(url: str | None = "https://cdn.example.com/file", mime_type: str | None = "audio/mpeg") -> FeedEntry:
    return FeedEntry(
        id="media-1",
        title="Media Item",
        media=[MediaGroup(contents=[MediaContent(url=url, mime_type=mime_type)])],
    )


def test_audio_mime_gives_audio_body():
    """audio/* media becomes an Audio body that is not yet downloaded"""
    article = classify_entry(_media_entry(url="https://cdn.example.com/ep1.mp3", mime_type="audio/mpeg"))

    assert isinstance(article.body, Audio)
    assert article.body.media.url == "https://cdn.example.com/ep1.mp3"
    assert article.body.media.mime_type == "audio/mpeg"
    assert article.body.media.downloaded is False


def test_video_mime_gives_video_body():
    article = classify_entry(_media_entry(mime_type="video/mp4"))

    assert article.body == Video(MediaLink(url="https://cdn.example.com/file", mime_type="video/mp4"))


def test_flash_mime_gives_youtube_link():
    """application/x-shockwave-flash keeps only the URL"""
    article = classify_entry(_media_entry(url="https://www.youtube.com/v/abc", mime_type="application/x-shockwave-flash"))

    assert article.body == YouTubeLink("https://www.youtube.com/v/abc")


def test_other_application_mime_is_rejected():
    with pytest.raises(UnknownMimeTypeError):
        classify_entry(_media_entry(mime_type="application/pdf"))


def test_image_mime_is_rejected():
    with pytest.raises(UnknownMimeTypeError):
        classify_entry(_media_entry(mime_type="image/jpeg"))


def test_mime_without_slash_is_rejected():
    with pytest.raises(UnknownMimeTypeError):
        classify_entry(_media_entry(mime_type="audio"))


def test_missing_mime_is_rejected():
    with pytest.raises(UnknownMimeTypeError):
        classify_entry(_media_entry(mime_type=None))


def test_missing_url_is_rejected():
    with pytest.raises(MissingDownloadUrlError):
        classify_entry(_media_entry(url=None))


def test_missing_url_checked_before_mime():
    """An item lacking both reports the missing URL"""
    with pytest.raises(MissingDownloadUrlError):
        classify_entry(_media_entry(url=None, mime_type=None))


def test_empty_media_group_is_rejected():
    entry = FeedEntry(id="x", media=[MediaGroup(contents=[])])

    with pytest.raises(EmptyContentError):
        classify_entry(entry)


def test_only_first_group_and_first_content_are_used():
    entry = FeedEntry(
        id="x",
        media=[
            MediaGroup(
                contents=[
                    MediaContent(url="https://cdn.example.com/a.mp4", mime_type="video/mp4"),
                    MediaContent(url="https://cdn.example.com/b.mp3", mime_type="audio/mpeg"),
                ]
            ),
            MediaGroup(contents=[MediaContent(url="https://cdn.example.com/c.mp3", mime_type="audio/mpeg")]),
        ],
    )

    article = classify_entry(entry)

    assert isinstance(article.body, Video)
    assert article.body.media.url == "https://cdn.example.com/a.mp4"


def test_empty_first_group_fails_even_if_later_groups_have_content():
    entry = FeedEntry(
        id="x",
        media=[
            MediaGroup(contents=[]),
            MediaGroup(contents=[MediaContent(url="https://cdn.example.com/c.mp3", mime_type="audio/mpeg")]),
        ],
    )

    with pytest.raises(EmptyContentError):
        classify_entry(entry)


def test_text_body_prefers_content_over_summary():
    entry = FeedEntry(id="t", content="<p>Full body</p>", summary="Short")

    article = classify_entry(entry)

    assert article.body == Text("<p>Full body</p>")
    assert article.description == "Short"


def test_text_body_falls_back_to_summary():
    entry = FeedEntry(id="t", summary="Only a summary")

    article = classify_entry(entry)

    assert article.body == Text("Only a summary")
    assert article.description == "Only a summary"


def test_empty_string_content_is_still_content():
    """Presence, not truthiness, decides the fallback"""
    article = classify_entry(FeedEntry(id="t", content="", summary="Summary"))

    assert article.body == Text("")


def test_no_media_no_content_no_summary_is_empty_body():
    with pytest.raises(EmptyBodyError):
        classify_entry(FeedEntry(id="t", title="Nothing here"))


def test_entry_errors_share_a_base_class_and_reason():
    with pytest.raises(EntryError) as excinfo:
        classify_entry(FeedEntry(id="t"))

    assert excinfo.value.kind == "empty_body"
    assert excinfo.value.reason


def test_metadata_is_copied_from_entry():
    published = datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc)
    updated = datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    entry = FeedEntry(
        id="urn:entry:1",
        title="Post",
        content="Body",
        summary="Short",
        authors=["Ann", "Bob"],
        published=published,
        updated=updated,
        link="https://example.com/post",
    )

    article = classify_entry(entry, feed_url="https://example.com/feed.xml")

    assert article.id == "urn:entry:1"
    assert article.name == "Post"
    assert article.author == "Ann, Bob"
    assert article.created == published
    assert article.updated == updated
    assert article.link == "https://example.com/post"
    assert article.feed_url == "https://example.com/feed.xml"


def test_single_author_is_not_joined():
    article = classify_entry(FeedEntry(id="t", summary="s", authors=["Ann"]))

    assert article.author == "Ann"


def test_missing_title_and_authors_use_defaults():
    article = classify_entry(FeedEntry(id="t", summary="s"))

    assert article.name == "??"
    assert article.author is None
    assert article.created is None
    assert article.updated is None


def test_fresh_article_is_unseen():
    article = classify_entry(_media_entry())

    assert article.viewed == Unseen()


def test_classification_is_deterministic():
    entry = _media_entry(mime_type="video/webm")

    assert classify_entry(entry) == classify_entry(entry)
