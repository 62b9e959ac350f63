"""Carry viewing progress from a previous article snapshot into fresh articles."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from .types import Article


def merge_progress(
    fresh: Iterable[Article],
    previous: Sequence[Article] | None,
) -> list[Article]:
    """Copy ``viewed`` from previous articles onto fresh ones with the same id.

    Every other field stays as freshly fetched. Lookup is a linear scan and the
    first previous article with a matching id wins. Inputs are not mutated.

    Args:
        fresh: Articles from the current fetch cycle
        previous: The last known snapshot, or None when there is none

    Returns:
        A new list with the same length and order as ``fresh``
    """
    if previous is None:
        return list(fresh)

    merged: list[Article] = []
    for article in fresh:
        known = _find_by_id(previous, article.id)
        if known is None:
            merged.append(article)
        else:
            merged.append(replace(article, viewed=known.viewed))
    return merged


def _find_by_id(articles: Sequence[Article], article_id: str) -> Article | None:
    for article in articles:
        if article.id == article_id:
            return article
    return None
