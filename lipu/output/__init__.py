"""Output rendering."""

from .renderer import render_line, render_markdown, render_text, status_tag

__all__ = ["render_line", "render_markdown", "render_text", "status_tag"]
