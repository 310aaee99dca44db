# windowquote/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_APP_ID = "default-app-id"
DEFAULT_DB_URL = "sqlite:///window_quote_data/window_quote.db"

# setting name -> environment variable
ENV_KEYS = {
    "app_id": "WINDOWQUOTE_APP_ID",
    "db_url": "WINDOWQUOTE_DB_URL",
    "initial_auth_token": "WINDOWQUOTE_INITIAL_AUTH_TOKEN",
    "log_level": "LOG_LEVEL",
    "json_logs": "WINDOWQUOTE_JSON_LOGS",
}


@dataclass(frozen=True)
class AppConfig:
    app_id: str = DEFAULT_APP_ID
    db_url: str = DEFAULT_DB_URL
    initial_auth_token: Optional[str] = None
    log_level: str = "INFO"
    json_logs: bool = False

    @property
    def quotes_collection(self) -> str:
        return f"artifacts/{self.app_id}/public/data/quotes"


def _truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in ("0", "", "false", "no", "off")


def build_config(secrets: Optional[Mapping[str, Any]] = None,
                 environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Resolve every setting from, in order: runtime secrets, environment, default.

    Empty strings count as "not set" so a blank env var falls through to
    the default.
    """
    secrets = secrets or {}
    environ = os.environ if environ is None else environ

    def pick(name: str, default):
        value = secrets.get(name)
        if value in (None, ""):
            value = environ.get(ENV_KEYS[name])
        if value in (None, ""):
            return default
        return value

    return AppConfig(
        app_id=str(pick("app_id", DEFAULT_APP_ID)),
        db_url=str(pick("db_url", DEFAULT_DB_URL)),
        initial_auth_token=pick("initial_auth_token", None),
        log_level=str(pick("log_level", "INFO")).upper(),
        json_logs=_truthy(pick("json_logs", False)),
    )


def load_config() -> AppConfig:
    """Build the config for a running Streamlit app (reads st.secrets when a secrets file exists)."""
    import streamlit as st

    try:
        secrets = {k: st.secrets[k] for k in ENV_KEYS if k in st.secrets}
    except FileNotFoundError:
        # no .streamlit/secrets.toml
        secrets = {}
    return build_config(secrets)
