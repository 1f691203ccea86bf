"""Tests for rank_suggestions and SuggestionRow label flattening."""

from app.application.dtos.search import SuggestionRow
from app.infrastructure.persistence.search import rank_suggestions


def _row(name=None, city=None, address=None) -> SuggestionRow:
    return SuggestionRow(name=name, city=city, address=address)


def test_labels_flatten_in_name_city_address_order() -> None:
    row = _row("Shibuya  Crossing", "Shibuya", "  2-1  Dogenzaka   Shibuya ")
    assert row.labels() == ["Shibuya Crossing", "Shibuya", "2-1 Dogenzaka Shibuya"]


def test_blank_labels_are_dropped() -> None:
    assert _row("Moonhouse", "", "    ").labels() == ["Moonhouse"]


def test_direct_matches_come_first_and_keep_candidate_order() -> None:
    rows = [
        _row("Hachiko", "Shibuya", "Tokyo"),
        _row("Shibuya Crossing", "Tokyo", None),
    ]
    assert rank_suggestions(rows, "shibuya", 10) == [
        "Shibuya",
        "Shibuya Crossing",
        "Hachiko",
        "Tokyo",
    ]


def test_duplicates_removed() -> None:
    rows = [_row("Shibuya Crossing", "Shibuya"), _row("Shibuya Ward Office", "Shibuya")]
    assert rank_suggestions(rows, "shibuya", 10) == [
        "Shibuya Crossing",
        "Shibuya",
        "Shibuya Ward Office",
    ]


def test_limit_applies_after_ordering() -> None:
    rows = [_row("Shibuya Crossing"), _row("Shibuya Ward Office")]
    assert rank_suggestions(rows, "SHIBUYA", 1) == ["Shibuya Crossing"]
    assert rank_suggestions(rows, "shibuya", 0) == []
