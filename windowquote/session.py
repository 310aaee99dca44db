# windowquote/session.py
from __future__ import annotations

import streamlit as st

from .auth import IdentityGate, IdentityProvider
from .config import AppConfig, load_config
from .controller import QuoteController
from .db import create_db_and_tables, get_engine
from .editor import QuoteEditor
from .gateway import QuoteGateway
from .logging_config import setup_logging
from .notify import Notice, NotificationChannel, PendingConfirmation
from .store import QuoteStore


@st.cache_resource(show_spinner=False)
def bootstrap() -> AppConfig:
    """Once per process: config, logging, schema."""
    config = load_config()
    setup_logging(config.log_level, config.json_logs)
    create_db_and_tables(get_engine(config.db_url))
    return config


def get_controller() -> QuoteController:
    """Per browser session: editor, gateway and channel live in st.session_state."""
    if "controller" not in st.session_state:
        config = bootstrap()
        engine = get_engine(config.db_url)
        gate = IdentityGate(IdentityProvider(engine), config.initial_auth_token)
        gateway = QuoteGateway(QuoteStore(engine), gate, config)
        controller = QuoteController(QuoteEditor.with_defaults(), gateway, NotificationChannel())
        controller.start()
        st.session_state.controller = controller
    return st.session_state.controller


def render_notification(controller: QuoteController) -> None:
    """Draw the single notice / confirmation, if one is showing."""
    current = controller.channel.current
    if current is None:
        return
    if isinstance(current, PendingConfirmation):
        st.warning(current.message)
        c1, c2, _ = st.columns([1, 1, 6])
        c1.button("Yes", key="confirm-yes", type="primary",
                  on_click=controller.resolve, args=(True,))
        c2.button("Cancel", key="confirm-no", on_click=controller.resolve, args=(False,))
        return
    if isinstance(current, Notice):
        show = {"success": st.success, "error": st.error}.get(current.level, st.info)
        show(current.message)
        st.button("OK", key="notice-ok", on_click=controller.channel.dismiss)


def enter_page(page: str) -> bool:
    """Record the page being drawn; True on the first run since the user was elsewhere."""
    arrived = st.session_state.get("current_page") != page
    st.session_state["current_page"] = page
    return arrived
