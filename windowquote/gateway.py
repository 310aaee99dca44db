# windowquote/gateway.py
from __future__ import annotations

import logging
from typing import Any, List, Sequence
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from .auth import IdentityGate
from .config import AppConfig
from .editor import QuoteEditor, WindowType
from .errors import DeleteError, FetchError, SaveError, SaveInProgressError, ValidationError
from .pricing import clean_name, compute_total, parse_price
from .store import Quote, QuoteStore

logger = logging.getLogger(__name__)

QUOTE_NAME_REQUIRED = "Quote name cannot be empty."


def _snapshot(items: Sequence[Any]) -> List[dict]:
    """Validated plain-dict copy of the line items; ids are filled in when missing."""
    out = []
    for it in items:
        if isinstance(it, WindowType):
            it = it.to_dict()
        if not isinstance(it, dict):
            raise ValidationError("Every line item must be a window type.")
        name = clean_name(it.get("name"))
        price = parse_price(it.get("price"))
        count = it.get("count", 0)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValidationError("Count must be a non-negative whole number.")
        item_id = it.get("id")
        out.append({"id": str(item_id) if item_id not in (None, "") else uuid4().hex,
                    "name": name, "price": price, "count": count})
    return out


def window_types_from_snapshot(snapshot: Any) -> List[WindowType]:
    """
    Rebuild editor items from a stored snapshot.

    Anything other than a list gives an empty quote; entries that are not
    readable window types are skipped.
    """
    if not isinstance(snapshot, list):
        return []
    items = []
    for raw in snapshot:
        try:
            name = clean_name(raw["name"])
            price = parse_price(raw.get("price", 0))
            count = max(0, int(raw.get("count", 0)))
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as exc:
            logger.warning("Skipping unreadable line item %r: %s", raw, exc)
            continue
        item_id = raw.get("id")
        items.append(WindowType(id=str(item_id) if item_id not in (None, "") else uuid4().hex,
                                name=name, price=price, count=count))
    return items


class QuoteGateway:
    """
    Translates editor state to and from the app's quote collection.

    Never touches editor state except in load_quote().
    """

    def __init__(self, store: QuoteStore, gate: IdentityGate, config: AppConfig):
        self.store = store
        self.gate = gate
        self.config = config
        self.is_saving = False
        self.is_loading = False
        self.saved_quotes: List[Quote] = []

    @property
    def collection(self) -> str:
        return self.config.quotes_collection

    def save_quote(self, name: Any, line_items: Sequence[Any]) -> Quote:
        owner_id = self.gate.require_user("Please wait for authentication to complete before saving.")
        clean = clean_name(name, QUOTE_NAME_REQUIRED)
        if self.is_saving:
            logger.warning("Save refused: another save is in flight")
            raise SaveInProgressError("A save is already in progress.")
        snapshot = _snapshot(line_items)
        total = compute_total(snapshot)
        self.is_saving = True
        try:
            return self.store.add(self.collection, name=clean, line_items=snapshot,
                                  total_cost=total, owner_id=owner_id)
        except SQLAlchemyError as exc:
            logger.exception("Error saving quote")
            raise SaveError(str(exc)) from exc
        finally:
            self.is_saving = False

    def list_quotes(self) -> List[Quote]:
        self.gate.require_user("Please wait for authentication to complete before viewing saved quotes.")
        self.is_loading = True
        try:
            fetched = self.store.list(self.collection)
        except SQLAlchemyError as exc:
            logger.exception("Error fetching quotes")
            raise FetchError(str(exc)) from exc
        finally:
            self.is_loading = False
        # TODO: filter by owner once quotes stop being shared across users
        self.saved_quotes = sorted(fetched, key=lambda q: q.saved_at, reverse=True)
        return self.saved_quotes

    def load_quote(self, quote: Quote, editor: QuoteEditor) -> List[WindowType]:
        self.gate.require_user("Please wait for authentication to complete before loading quotes.")
        items =window_types_from_snapshot(quote.line_items)
        editor.replace_items(items)
        logger.info("Loaded quote %s (%d line items)", quote.id, len(items), extra={"quote_id": quote.id})
        return items

    def delete_quote(self, quote_id: str) -> List[Quote]:
        self.gate.require_user("Please wait for authentication to complete before deleting quotes.")
        try:
            deleted = self.store.delete(self.collection, quote_id)
        except SQLAlchemyError as exc:
            logger.exception("Error deleting quote")
            raise DeleteError(str(exc)) from exc
        if not deleted:
            raise DeleteError(f"No saved quote with id {quote_id}.")
        return self.list_quotes()
