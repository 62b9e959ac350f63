"""Tests for progress merging."""

from lipu.core.merge import merge_progress
from lipu.core.types import Article, Fully, Text, Unseen, UntilParagraph, UntilSecond


def _sample_article(article_id: str, *, name: str = "Title", viewed=None) -> Article:
    return Article(
        id=article_id,
        name=name,
        body=Text("body"),
        viewed=viewed if viewed is not None else Unseen(),
    )


def test_no_previous_returns_fresh_unchanged():
    fresh = [_sample_article("a"), _sample_article("b")]

    assert merge_progress(fresh, None) == fresh


def test_matching_id_takes_previous_progress():
    fresh = [_sample_article("a")]
    previous = [_sample_article("a", viewed=Fully())]

    merged = merge_progress(fresh, previous)

    assert merged[0].viewed == Fully()


def test_unmatched_article_stays_unseen():
    fresh = [_sample_article("a"), _sample_article("new")]
    previous = [_sample_article("a", viewed=Fully())]

    merged = merge_progress(fresh, previous)

    assert [a.id for a in merged] == ["a", "new"]
    assert merged[1].viewed == Unseen()


def test_other_fields_stay_fresh():
    """Only viewed comes from the previous snapshot"""
    fresh = [_sample_article("a", name="New title")]
    previous = [_sample_article("a", name="Old title", viewed=UntilSecond(42))]

    merged = merge_progress(fresh, previous)

    assert merged[0].name == "New title"
    assert merged[0].viewed == UntilSecond(42)


def test_partial_progress_is_copied_verbatim():
    merged = merge_progress([_sample_article("a")], [_sample_article("a", viewed=UntilParagraph(3))])

    assert merged[0].viewed == UntilParagraph(3)


def test_duplicate_previous_ids_resolve_to_first_match():
    previous = [
        _sample_article("a", viewed=UntilParagraph(1)),
        _sample_article("a", viewed=Fully()),
    ]

    merged = merge_progress([_sample_article("a")], previous)

    assert merged[0].viewed == UntilParagraph(1)


def test_inputs_are_not_mutated():
    fresh = [_sample_article("a")]
    previous = [_sample_article("a", viewed=Fully())]

    merge_progress(fresh, previous)

    assert fresh[0].viewed == Unseen()


def test_empty_previous_leaves_everything_unseen():
    merged = merge_progress([_sample_article("a")], [])

    assert merged[0].viewed == Unseen()
