# windowquote/editor.py
from __future__ import annotations

from dataclasses import dataclass, asdict, field, replace
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .pricing import clean_name, compute_total, parse_price


@dataclass
class WindowType:
    id: str
    name: str
    price: float
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EditSession:
    """Working copy of one line item while the edit form is open."""
    item_id: str
    name: str
    price: str


# Catalogue a fresh session starts with (prices are filled in per job)
DEFAULT_WINDOW_TYPES = [
    ("sash", "Sash Window"),
    ("fw-small", "FW (Small)"),
    ("fw-medium", "FW (Medium)"),
    ("fw-large", "FW (Large)"),
    ("screen", "Screen"),
]


def default_window_types() -> List[WindowType]:
    return [WindowType(id=i, name=n, price=0.0, count=0) for i, n in DEFAULT_WINDOW_TYPES]


@dataclass
class QuoteEditor:
    """
    Source of truth for the quote being built.

    Every mutation assigns a freshly built list to `items`, so a reader
    holding the previous list never sees a half-applied change.
    """
    items: List[WindowType] = field(default_factory=list)
    add_form_open: bool = False
    draft_name: str = ""
    draft_price: str = ""
    edit_session: Optional[EditSession] = None
    picked_id: Optional[str] = None

    @classmethod
    def with_defaults(cls) -> "QuoteEditor":
        return cls(items=default_window_types())

    # ---- lookups -----------------------------------------------------------
    def find(self, item_id: str) -> Optional[WindowType]:
        for it in self.items:
            if it.id == item_id:
                return it
        return None

    def index_of(self, item_id: str) -> int:
        for i, it in enumerate(self.items):
            if it.id == item_id:
                return i
        return -1

    @property
    def total_cost(self) -> float:
        return compute_total(self.items)

    # ---- add flow ----------------------------------------------------------
    def open_add_form(self) -> None:
        self.add_form_open = True

    def close_add_form(self) -> None:
        self.add_form_open = False
        self.draft_name = ""
        self.draft_price = ""

    def add_window_type(self, name: Any, price: Any) -> WindowType:
        clean = clean_name(name)
        value = parse_price(price)
        item = WindowType(id=uuid4().hex, name=clean, price=value, count=0)
        self.items = [*self.items, item]
        self.close_add_form()
        return item

    # ---- counts ------------------------------------------------------------
    def increment_count(self, item_id: str) -> None:
        self.items = [replace(it, count=it.count + 1) if it.id == item_id else it for it in self.items]

    def decrement_count(self, item_id: str) -> None:
        self.items = [replace(it, count=max(0, it.count - 1)) if it.id == item_id else it for it in self.items]

    # ---- edit session ------------------------------------------------------
    def open_edit(self, item_id: str) -> Optional[EditSession]:
        item = self.find(item_id)
        if item is None:
            return None
        self.edit_session = EditSession(item_id=item.id, name=item.name, price=f"{item.price:.2f}")
        return self.edit_session

    def save_edit(self, name: Any, price: Any) -> Optional[WindowType]:
        session = self.edit_session
        if session is None:
            return None
        clean = clean_name(name)
        value = parse_price(price)
        updated = None
        rebuilt = []
        for it in self.items:
            if it.id == session.item_id:
                updated = replace(it, name=clean, price=value)
                rebuilt.append(updated)
            else:
                rebuilt.append(it)
        self.items = rebuilt
        self.edit_session = None
        return updated

    def cancel_edit(self) -> None:
        self.edit_session = None

    # ---- removal -----------------------------------------------------------
    def remove_window_type(self, item_id: str) -> Optional[WindowType]:
        removed = self.find(item_id)
        if removed is None:
            return None
        self.items = [it for it in self.items if it.id != item_id]
        if self.edit_session and self.edit_session.item_id == item_id:
            self.edit_session = None
        if self.picked_id == item_id:
            self.picked_id = None
        return removed

    # ---- ordering ----------------------------------------------------------
    def move_item(self, source_index: int, destination_index: int) -> bool:
        """Pop the item at source_index and insert it at destination_index."""
        n = len(self.items)
        if source_index == destination_index:
            return False
        if not (0 <= source_index < n and 0 <= destination_index < n):
            return False
        rebuilt = list(self.items)
        moved = rebuilt.pop(source_index)
        rebuilt.insert(destination_index, moved)
        self.items = rebuilt
        return True

    def reorder(self, dragged_id: str, target_id: str) -> bool:
        """Move dragged_id to the position target_id occupies right now."""
        if dragged_id == target_id:
            return False
        src = self.index_of(dragged_id)
        dst = self.index_of(target_id)
        if src < 0 or dst < 0:
            return False
        return self.move_item(src, dst)

    def pick_up(self, item_id: str) -> None:
        if self.find(item_id) is not None:
            self.picked_id = item_id

    def release(self) -> None:
        self.picked_id = None

    def drop_on(self, target_id: str) -> bool:
        picked = self.picked_id
        self.picked_id = None
        if picked is None:
            return False
        return self.reorder(picked, target_id)

    # ---- bulk --------------------------------------------------------------
    def replace_items(self, items: List[WindowType]) -> None:
        self.items = list(items)
        self.edit_session = None
        self.picked_id = None

    def snapshot(self) -> List[Dict[str, Any]]:
        return [it.to_dict() for it in self.items]
