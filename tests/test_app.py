import os
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

pytest.importorskip("streamlit.testing.v1")
from streamlit.testing.v1 import AppTest

from windowquote import session

APP = os.path.join(os.path.dirname(__file__), "..", "app.py")


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("WINDOWQUOTE_DB_URL", f"sqlite:///{tmp_path / 'quotes.db'}")
    monkeypatch.setenv("WINDOWQUOTE_APP_ID", "app-test")
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


def test_counter_page_renders(app):
    assert not app.exception
    assert app.title[0].value == "🪟 Window Counter"
    assert app.metric[0].value == "$0.00"


def test_increment_updates_count(app):
    app.button(key="inc-sash").click().run()
    editor = app.session_state["controller"].editor
    assert editor.find("sash").count == 1


def _db_down(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("db down"))


def test_list_failure_is_shown_in_the_same_run(app):
    app.session_state["controller"].gateway.store.list = _db_down
    app.button(key="view-quotes").click().run()
    assert not app.exception
    assert app.error[0].value.startswith("Failed to load quotes:")


def test_enter_page_reports_arrivals(monkeypatch):
    monkeypatch.setattr(session, "st", SimpleNamespace(session_state={}))
    assert session.enter_page("saved_quotes")
    assert not session.enter_page("saved_quotes")
    assert session.enter_page("counter")
    assert session.enter_page("saved_quotes")
