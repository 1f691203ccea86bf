"""Tests for domain value objects (Address, Coordinates, normalize_text)."""

import pytest

from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import Address, Coordinates, normalize_text


def test_normalize_text() -> None:
    assert normalize_text("  Shibuya ") == "Shibuya"
    assert normalize_text("   ") is None
    assert normalize_text(None) is None


def test_full_address_skips_blank_parts() -> None:
    address = Address(address_line="1-1 Marunouchi", city="Chiyoda", country="Japan")
    assert address.full_address == "1-1 Marunouchi Chiyoda Japan"
    assert not address.is_blank()
    assert Address().is_blank()


def test_search_text_keeps_positions() -> None:
    """Absent parts render empty so the text equals the generated column."""
    address = Address(address_line="1-1 Marunouchi", city="Chiyoda")
    assert address.search_text == "1-1 Marunouchi Chiyoda   "


def test_differs_from_ignores_surrounding_whitespace() -> None:
    a = Address(city="Chiyoda")
    assert not a.differs_from(Address(city=" Chiyoda "))
    assert a.differs_from(Address(city="Minato"))
    assert Address(city="").differs_from(Address()) is False


def test_coordinates_range() -> None:
    Coordinates(latitude=35.68, longitude=139.76)
    with pytest.raises(ValidationException) as exc_info:
        Coordinates(latitude=91, longitude=0)
    assert exc_info.value.details == {"field": "latitude"}
    with pytest.raises(ValidationException):
        Coordinates(latitude=0, longitude=-181)
