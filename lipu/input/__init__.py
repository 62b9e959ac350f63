"""Feed document parsing."""

from .parser import parse_entry, parse_feed

__all__ = ["parse_feed", "parse_entry"]
