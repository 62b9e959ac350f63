"""
Article rendering for terminal and Markdown output.

Each article renders as one human-readable line:
    {status} {title} ({body kind})
where status is "new" for unseen articles, "viewed" for fully viewed ones,
and "partial" for anything in between.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from ..core.types import Article, Audio, Fully, Unseen, Video, YouTubeLink


def status_tag(article: Article) -> str:
    if isinstance(article.viewed, Unseen):
        return "new"
    if isinstance(article.viewed, Fully):
        return "viewed"
    return "partial"


def render_line(article: Article) -> str:
    """Render a single article as one line, e.g. "new Episode 12 (audio)"."""
    return f"{status_tag(article)} {article.name} ({article.body.kind})"


def render_text(articles: list[Article]) -> str:
    return "\n".join(render_line(article) for article in articles)


def render_markdown(articles: list[Article], output_path: Path, title: str) -> None:
    """Render articles as a Markdown report.

    Articles keep the order they are given in, so a refresh result reads
    newest first.

    Args:
        articles: Articles to render
        output_path: Path where the Markdown file will be written
        title: Report title for the top-level heading
    """
    generated_at = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines = [f"# {title}", "", f"Generated: {generated_at}", f"Total: {len(articles)}", ""]
    for art in articles:
        lines.append(f"### {art.name}")
        lines.append(f"- Status: {status_tag(art)}")
        lines.append(f"- Kind: {art.body.kind}")
        if art.author:
            lines.append(f"- Author: {art.author}")
        stamp = art.created or art.updated
        if stamp:
            lines.append(f"- Time: {stamp.isoformat()}")
        if art.link:
            lines.append(f"- Link: {art.link}")
        media_url = _media_url(art)
        if media_url:
            lines.append(f"- Media: {media_url}")
        if art.feed_url:
            lines.append(f"- Feed: {art.feed_url}")
        if art.description:
            lines.append(f"- Summary: {art.description}")
        lines.append("")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(lines), encoding="utf-8")


def _media_url(article: Article) -> str | None:
    body = article.body
    if isinstance(body, (Audio, Video)):
        return body.media.url
    if isinstance(body, YouTubeLink):
        return body.url
    return None
