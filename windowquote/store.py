# windowquote/store.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from .db import get_session
from .db_models import QuoteDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quote:
    id: str
    name: str
    line_items: Any  # raw snapshot as stored; may be malformed
    total_cost: float
    owner_id: str
    saved_at: datetime


def _as_utc(ts: datetime) -> datetime:
    # SQLite hands datetimes back naive
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def _to_quote(doc: QuoteDocument) -> Quote:
    return Quote(
        id=doc.id,
        name=doc.name,
        line_items=doc.line_items,
        total_cost=float(doc.total_cost),
        owner_id=doc.owner_id,
        saved_at=_as_utc(doc.timestamp),
    )


class QuoteStore:
    """
    Collection-scoped create/read/delete over the quote_document table.

    Results come back in whatever order the database returns them; callers
    that need an order sort for themselves. Database failures propagate as
    sqlalchemy.exc.SQLAlchemyError.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def add(self, collection: str, *, name: str, line_items: List[Dict[str, Any]],
            total_cost: float, owner_id: str) -> Quote:
        # id and timestamp are assigned here, never by the caller
        doc = QuoteDocument(
            collection=collection,
            name=name,
            line_items=line_items,
            total_cost=total_cost,
            owner_id=owner_id,
        )
        with get_session(self.engine) as s:
            s.add(doc)
            s.commit()
            s.refresh(doc)
            quote = _to_quote(doc)
        logger.info("Stored quote %s in %s", quote.id, collection,
                    extra={"quote_id": quote.id, "collection": collection, "total": total_cost})
        return quote

    def get(self, collection: str, doc_id: str) -> Optional[Quote]:
        with get_session(self.engine) as s:
            doc = s.get(QuoteDocument, doc_id)
            if doc is None or doc.collection != collection:
                return None
            return _to_quote(doc)

    def list(self, collection: str) -> List[Quote]:
        with get_session(self.engine) as s:
            docs = s.exec(select(QuoteDocument).where(QuoteDocument.collection == collection)).all()
            return [_to_quote(d) for d in docs]

    def delete(self, collection: str, doc_id: str) -> bool:
        """Returns False when no such document exists in the collection."""
        with get_session(self.engine) as s:
            doc = s.get(QuoteDocument, doc_id)
            if doc is None or doc.collection != collection:
                return False
            s.delete(doc)
            s.commit()
        logger.info("Deleted quote %s from %s", doc_id, collection,
                    extra={"quote_id": doc_id, "collection": collection})
        return True
