# windowquote/db_models.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_doc_id() -> str:
    return uuid4().hex


# ---------------------------
# Saved quotes
# ---------------------------

class QuoteDocument(SQLModel, table=True):
    """
    One saved quote. `collection` carries the app-scoped path
    (artifacts/{app_id}/public/data/quotes) so several apps can share a database.
    """
    __tablename__ = "quote_document"

    id: str = Field(default_factory=new_doc_id, primary_key=True)
    collection: str = Field(nullable=False, index=True)

    name: str = Field(nullable=False)
    line_items: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_cost: float = Field(ge=0, nullable=False)
    timestamp: datetime = Field(default_factory=utcnow, nullable=False, index=True)
    owner_id: str = Field(nullable=False, index=True)


# ---------------------------
# Identities
# ---------------------------

class UserAccount(SQLModel, table=True):
    __tablename__ = "user_account"

    uid: str = Field(default_factory=new_doc_id, primary_key=True)
    is_anonymous: bool = Field(default=True, nullable=False)
    # custom sign-in token; anonymous accounts have none
    token: Optional[str] = Field(default=None, index=True, unique=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
