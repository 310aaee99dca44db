import pytest

from windowquote.editor import WindowType
from windowquote.errors import ValidationError
from windowquote.pricing import clean_name, compute_total, format_money, parse_price


@pytest.mark.parametrize("raw,expected", [("150", 150.0), (" 19.99 ", 19.99), (0, 0.0), (12.5, 12.5)])
def test_parse_price_accepts(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", ["", "-0.01", "ten", None, float("inf"), False, [1]])
def test_parse_price_rejects(raw):
    with pytest.raises(ValidationError):
        parse_price(raw)


def test_clean_name_uses_given_message():
    with pytest.raises(ValidationError, match="Quote name cannot be empty."):
        clean_name(" ", "Quote name cannot be empty.")


def test_compute_total_objects_and_dicts():
    items = [WindowType("a", "A", 100.0, 2), WindowType("b", "B", 20.0, 3)]
    assert compute_total(items) == 260.00
    assert compute_total([it.to_dict() for it in items]) == 260.00
    assert compute_total([]) == 0


def test_compute_total_rounds_to_cents():
    assert compute_total([WindowType("a", "A", 0.1, 3)]) == 0.3


def test_format_money():
    assert format_money(1234.5) == "$1,234.50"
