# windowquote/db.py
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import streamlit as st
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine


# ---------------------------------------------------------------------
# Engine factory
# ---------------------------------------------------------------------
def build_engine(db_url: str) -> Engine:
    """
    Create a SQLAlchemy/SQLModel engine for db_url.

    - sqlite:// (in-memory) shares one connection so every session sees the same data.
    - sqlite file: creates the parent directory and sets journal_mode=WAL,
      busy_timeout, foreign_keys=ON.
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(db_url, connect_args={"check_same_thread": False}, poolclass=StaticPool)

    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        db_path = db_url.split(":///", 1)[-1]
        if db_path:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(db_url, connect_args=connect_args, pool_pre_ping=True)

    if db_url.startswith("sqlite"):
        # WAL is persistent on the database file once set.
        with engine.connect() as conn:
            conn.exec_driver_sql("PRAGMA journal_mode=WAL;")
            conn.exec_driver_sql("PRAGMA synchronous=NORMAL;")
            conn.exec_driver_sql("PRAGMA busy_timeout=5000;")
            conn.exec_driver_sql("PRAGMA foreign_keys=ON;")

    return engine


@st.cache_resource(show_spinner=False)
def get_engine(db_url: str) -> Engine:
    """Engine shared across reruns and sessions of the Streamlit app."""
    return build_engine(db_url)


# ---------------------------------------------------------------------
# Schema creation (first run)
# ---------------------------------------------------------------------
def create_db_and_tables(engine: Engine) -> None:
    # importing the models registers them on SQLModel.metadata
    from . import db_models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# ---------------------------------------------------------------------
# Session helper
# ---------------------------------------------------------------------
@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    """
    Context-managed Session:

        with get_session(engine) as s:
            s.add(obj)
            s.commit()

    """
    with Session(engine, expire_on_commit=False) as session:
        yield session
