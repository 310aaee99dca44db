# tests/conftest.py
import os, sys

import pytest

# put the project root (the folder holding "windowquote") first on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from windowquote.auth import IdentityGate, IdentityProvider
from windowquote.config import AppConfig
from windowquote.controller import QuoteController
from windowquote.db import build_engine, create_db_and_tables
from windowquote.editor import QuoteEditor
from windowquote.gateway import QuoteGateway
from windowquote.notify import NotificationChannel
from windowquote.store import QuoteStore


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    create_db_and_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def config():
    return AppConfig(app_id="test-app", db_url="sqlite://")


@pytest.fixture
def provider(engine):
    return IdentityProvider(engine)


@pytest.fixture
def gate(provider):
    return IdentityGate(provider).start()


@pytest.fixture
def store(engine):
    return QuoteStore(engine)


@pytest.fixture
def gateway(store, gate, config):
    return QuoteGateway(store, gate, config)


@pytest.fixture
def controller(gateway):
    c = QuoteController(QuoteEditor(), gateway, NotificationChannel())
    c.start()
    return c
