from datetime import datetime, timezone
from pathlib import Path

from lipu.core.types import (
    Article,
    Audio,
    Fully,
    MediaLink,
    Text,
    Unseen,
    UntilParagraph,
    UntilSecond,
    Video,
    YouTubeLink,
)
from lipu.output.renderer import render_line, render_markdown, render_text


def _sample_article(*, name: str = "Title", body=None, viewed=None, **kwargs) -> Article:
    return Article(
        id=name,
        name=name,
        body=body if body is not None else Text("body"),
        viewed=viewed if viewed is not None else Unseen(),
        **kwargs,
    )


def test_render_line_status_tags() -> None:
    assert render_line(_sample_article(name="A")) == "new A (article)"
    assert render_line(_sample_article(name="B", viewed=Fully())) == "viewed B (article)"
    assert render_line(_sample_article(name="C", viewed=UntilParagraph(2))) == "partial C (article)"
    assert render_line(_sample_article(name="D", viewed=UntilSecond(90))) == "partial D (article)"


def test_render_line_body_kinds() -> None:
    media = MediaLink(url="https://cdn.example.com/x", mime_type="audio/mpeg")

    assert render_line(_sample_article(name="Ep", body=Audio(media))) == "new Ep (audio)"
    assert render_line(_sample_article(name="Vid", body=Video(media))) == "new Vid (video)"
    assert (
        render_line(_sample_article(name="Yt", body=YouTubeLink("https://www.youtube.com/v/abc")))
        == "new Yt (youtube video)"
    )


def test_render_text_one_line_per_article() -> None:
    text = render_text([_sample_article(name="A"), _sample_article(name="B", viewed=Fully())])

    assert text.splitlines() == ["new A (article)", "viewed B (article)"]


def test_render_markdown_keeps_order_and_metadata(tmp_path: Path) -> None:
    output_path = tmp_path / "reports" / "lipu.md"
    articles = [
        _sample_article(
            name="Newest",
            body=Audio(MediaLink(url="https://cdn.example.com/ep.mp3", mime_type="audio/mpeg")),
            author="Ann, Bob",
            created=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
            feed_url="https://example.com/podcast.xml",
        ),
        _sample_article(
            name="Older",
            viewed=Fully(),
            description="A summary",
            link="https://example.com/older",
        ),
    ]

    render_markdown(articles, output_path, title="My feeds")
    text = output_path.read_text(encoding="utf-8")

    assert text.startswith("# My feeds")
    assert "Total: 2" in text
    assert text.index("### Newest") < text.index("### Older")
    assert "- Media: https://cdn.example.com/ep.mp3" in text
    assert "- Author: Ann, Bob" in text
    assert "- Time: 2024-03-01T12:00:00+00:00" in text
    assert "- Feed: https://example.com/podcast.xml" in text
    assert "- Status: viewed" in text
    assert "- Link: https://example.com/older" in text
    assert "- Summary: A summary" in text
