from __future__ import annotations
import math
from typing import Any, Iterable

from .errors import ValidationError

NAME_REQUIRED = "Window name cannot be empty."
PRICE_INVALID = "Price must be a valid non-negative number."


def clean_name(name: Any, message: str = NAME_REQUIRED) -> str:
    cleaned = str(name or "").strip()
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def parse_price(value: Any) -> float:
    """Accepts numbers or form strings ("150", "19.99"); rejects NaN, inf, negatives and bools."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(PRICE_INVALID)
    try:
        price = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise ValidationError(PRICE_INVALID) from None
    if not math.isfinite(price) or price < 0:
        raise ValidationError(PRICE_INVALID)
    return price


def line_total(price: float, count: int) -> float:
    return float(price) * int(count)


def compute_total(items: Iterable[Any]) -> float:
    """Sum of price * count over window types (objects or dicts), rounded to cents."""
    total = 0.0
    for it in items:
        if isinstance(it, dict):
            total += line_total(it["price"], it["count"])
        else:
            total += line_total(it.price, it.count)
    return round(total, 2)


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"
