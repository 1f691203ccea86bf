"""DTOs for place search and suggestions (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.domain.enums import PlaceVisibility


@dataclass(frozen=True)
class PlaceScope:
    """Base set of places a search narrows (e.g. all visible, or one author's).

    Chosen by the caller; the search component never decides authorization
    or soft-delete visibility itself.
    """

    visibility: PlaceVisibility = PlaceVisibility.ACTIVE
    author_id: int | None = None

    @classmethod
    def all_active(cls) -> "PlaceScope":
        return cls()

    @classmethod
    def authored_by(cls, author_id: int) -> "PlaceScope":
        return cls(author_id=author_id)

    @classmethod
    def with_deleted(cls) -> "PlaceScope":
        return cls(visibility=PlaceVisibility.WITH_DELETED)

    @classmethod
    def trash(cls) -> "PlaceScope":
        return cls(visibility=PlaceVisibility.ONLY_DELETED)


@dataclass(frozen=True)
class SearchQuery:
    """One search or suggestion request. Built per request and discarded.

    text is trimmed on construction; callers must not run a query whose
    text is blank (see is_blank).
    """

    text: str
    scope: PlaceScope = field(default_factory=PlaceScope)
    limit: int = 50
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", (self.text or "").strip())

    @property
    def is_blank(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class SuggestionRow:
    """Label columns of one candidate row: name, city, and address text."""

    name: str | None
    city: str | None
    address: str | None

    def labels(self) -> list[str]:
        """Non-empty labels in name, city, address order (whitespace collapsed)."""
        out: list[str] = []
        for value in (self.name, self.city, self.address):
            if value is None:
                continue
            label = " ".join(value.split())
            if label:
                out.append(label)
        return out
