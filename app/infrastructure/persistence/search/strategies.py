"""Search strategies: how a text query filters and orders places.

Both strategies gate inclusion by case-insensitive substring containment over
name, city, description and the address text. They differ only in ordering:
FuzzyRankedStrategy ranks by the best trigram similarity (pg_trgm) across
those fields, PlainOrderedStrategy by recency.

Query text always reaches the database as a bound parameter.
"""

from abc import ABC, abstractmethod

from sqlalchemy import ColumnElement, Text, func, literal_column, or_

from app.domain.value_objects.core import ADDRESS_FIELDS
from app.infrastructure.persistence.models.place import Place

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so value matches literally (escape char: backslash)."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: str) -> str:
    return f"%{escape_like(value)}%"


def live_address_expression() -> ColumnElement[str]:
    """COALESCE(address_line,'') || ' ' || ... in ADDRESS_FIELDS order.

    Same text as the full_address_cached generated column.
    """
    parts = [func.coalesce(getattr(Place, name), "") for name in ADDRESS_FIELDS]
    expr = parts[0]
    for part in parts[1:]:
        expr = expr + " " + part
    return expr


def cached_address_column() -> ColumnElement[str]:
    """places.full_address_cached, created by the trigram migration.

    Referenced by name only: the ORM does not map it, so stores without the
    column still accept inserts and updates.
    """
    return literal_column("places.full_address_cached", Text)


class SearchStrategy(ABC):
    """Filter and ordering policy for one kind of record store."""

    name: str

    @abstractmethod
    def address_expression(self) -> ColumnElement[str]:
        """Address text to match, rank and suggest from."""

    @abstractmethod
    def predicate(self, text: str) -> ColumnElement[bool]:
        """Inclusion filter for trimmed, non-empty text."""

    @abstractmethod
    def order_by(self, text: str) -> list[ColumnElement]:
        """Ordering for matching rows; always ends with created_at, id."""

    def searchable_columns(self) -> list[ColumnElement]:
        return [Place.name, Place.city, Place.description, self.address_expression()]

    @staticmethod
    def recency_order() -> list[ColumnElement]:
        return [Place.created_at.desc(), Place.id.desc()]


class PlainOrderedStrategy(SearchStrategy):
    """LOWER(col) LIKE pattern across searchable fields; newest first."""

    name = "plain_ordered"

    def address_expression(self) -> ColumnElement[str]:
        return live_address_expression()

    def predicate(self, text: str) -> ColumnElement[bool]:
        pattern = contains_pattern(text.lower())
        return or_(
            *(
                func.lower(col).like(pattern, escape=LIKE_ESCAPE)
                for col in self.searchable_columns()
            )
        )

    def order_by(self, text: str) -> list[ColumnElement]:
        return self.recency_order()


class FuzzyRankedStrategy(SearchStrategy):
    """ILIKE across searchable fields; best trigram similarity first.

    Requires the pg_trgm extension. With use_cached_address the stored
    full_address_cached column replaces the live concatenation so its
    trigram index can serve the match.
    """

    name = "fuzzy_ranked"

    def __init__(self, use_cached_address: bool = False) -> None:
        self.use_cached_address = use_cached_address

    def address_expression(self) -> ColumnElement[str]:
        if self.use_cached_address:
            return func.coalesce(cached_address_column(), "")
        return live_address_expression()

    def predicate(self, text: str) -> ColumnElement[bool]:
        pattern = contains_pattern(text)
        return or_(
            *(col.ilike(pattern, escape=LIKE_ESCAPE) for col in self.searchable_columns())
        )

    def similarity(self, text: str) -> ColumnElement[float]:
        return func.greatest(
            func.similarity(func.coalesce(Place.name, ""), text),
            func.similarity(func.coalesce(Place.city, ""), text),
            func.similarity(func.coalesce(Place.description, ""), text),
            func.similarity(self.address_expression(), text),
        )

    def order_by(self, text: str) -> list[ColumnElement]:
        return [self.similarity(text).desc(), *self.recency_order()]
