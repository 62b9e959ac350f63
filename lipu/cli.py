"""
Command-line interface for lipu.

Uses Typer to provide a CLI that refreshes the configured feeds and prints
one line per article, newest first.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .output.renderer import render_line, render_markdown
from .runner import Subscriptions
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Read RSS, Atom and JSON feeds in one time-ordered list."""


@app.command()
def refresh(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    feed: list[str] = typer.Option([], "--feed", "-f", help="Feed URL; may be repeated."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Also write a Markdown report to this path."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    log_dir: Path = typer.Option(Path("."), "--log-dir", help="Directory for the log file."),
):
    """Refresh all feeds and list their articles.

    Args:
        config: Optional path to YAML config file
        feed: Extra feed URLs, refreshed after the configured ones
        output: Optional Markdown report path
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
        log_dir: Directory where the log file is written
    """
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    logger = setup_logging(cfg.logging, log_dir)

    subscriptions = Subscriptions()
    for url in [*cfg.feeds.urls, *feed]:
        subscriptions = subscriptions.with_feed(url)

    if not subscriptions.feeds:
        console.print("No feeds configured. Pass --feed or set feeds.urls in the config.")
        raise typer.Exit(code=1)

    articles = subscriptions.refresh_sync(fetch_cfg=cfg.fetch, logger=logger)

    for article in articles:
        console.print(escape(render_line(article)))

    if output is not None or cfg.output.format == "markdown":
        report_path = output or Path("lipu.md")
        render_markdown(articles, report_path, cfg.output.title)
        console.print(f"Report generated: {report_path}")


if __name__ == "__main__":
    app()
