# windowquote/controller.py
from __future__ import annotations

import logging
from typing import Any, Optional

from .editor import QuoteEditor, WindowType
from .errors import AuthNotReadyError, FetchError, QuoteError, SaveError
from .gateway import QuoteGateway
from .notify import ConfirmAction, NotificationChannel, PendingConfirmation
from .store import Quote

logger = logging.getLogger(__name__)


class QuoteController:
    """
    What the page buttons call.

    Errors never escape: each QuoteError becomes a notice on the channel, and
    destructive or overwriting actions park a PendingConfirmation that
    resolve() later consumes.
    """

    def __init__(self, editor: QuoteEditor, gateway: QuoteGateway, channel: NotificationChannel):
        self.editor = editor
        self.gateway = gateway
        self.channel = channel
        self.save_dialog_open = False
        self.quotes_view_open = False
        # set by a confirmed load; the list page switches back to the counter on it
        self.load_completed = False

    def start(self) -> None:
        """Fire the identity gate and report a sign-in failure, if any."""
        gate = self.gateway.gate.start()
        if gate.error is not None:
            self.channel.notify(f"Authentication error: {gate.error}", "error")

    # ---- editor commands ---------------------------------------------------
    def add_window_type(self, name: Any, price: Any) -> Optional[WindowType]:
        try:
            return self.editor.add_window_type(name, price)
        except QuoteError as exc:
            self.channel.notify(str(exc), "error")
            return None

    def save_edit(self, name: Any, price: Any) -> Optional[WindowType]:
        try:
            return self.editor.save_edit(name, price)
        except QuoteError as exc:
            self.channel.notify(str(exc), "error")
            return None

    def delete_window_type(self, item_id: str) -> PendingConfirmation:
        return self.channel.confirm(
            ConfirmAction.DELETE_WINDOW_TYPE, item_id,
            "Are you sure you want to delete this window type?",
        )

    # ---- persistence commands ----------------------------------------------
    def open_save_dialog(self) -> bool:
        gate = self.gateway.gate
        if not gate.ready or not gate.user_id:
            self.channel.notify("Please wait for authentication to complete before saving.")
            return False
        self.save_dialog_open = True
        return True

    def close_save_dialog(self) -> None:
        self.save_dialog_open = False

    def save_quote(self, name: Any) -> Optional[Quote]:
        try:
            quote = self.gateway.save_quote(name, self.editor.items)
        except SaveError as exc:
            self.channel.notify(f"Failed to save quote: {exc}", "error")
            return None
        except QuoteError as exc:
            self.channel.notify(str(exc), "error")
            return None
        self.save_dialog_open = False
        self.channel.notify("Quote saved successfully!", "success")
        return quote

    def view_quotes(self) -> bool:
        try:
            self.gateway.list_quotes()
        except FetchError as exc:
            self.channel.notify(f"Failed to load quotes: {exc}", "error")
            return False
        except AuthNotReadyError as exc:
            self.channel.notify(str(exc))
            return False
        self.quotes_view_open = True
        return True

    def close_quotes_view(self) -> None:
        self.quotes_view_open = False

    def load_quote(self, quote: Quote) -> PendingConfirmation:
        return self.channel.confirm(
            ConfirmAction.LOAD_QUOTE, quote,
            f'Are you sure you want to load "{quote.name}"? This will replace your current quote.',
        )

    def delete_quote(self, quote_id: str) -> PendingConfirmation:
        return self.channel.confirm(
            ConfirmAction.DELETE_QUOTE, quote_id,
            "Are you sure you want to delete this saved quote?",
        )

    # ---- confirmation ------------------------------------------------------
    def resolve(self, accepted: bool) -> bool:
        """Consume the pending confirmation; run its action only when accepted."""
        pending = self.channel.take_pending()
        if pending is None or not accepted:
            return False
        handler = {
            ConfirmAction.DELETE_WINDOW_TYPE: self._confirm_delete_window_type,
            ConfirmAction.LOAD_QUOTE: self._confirm_load_quote,
            ConfirmAction.DELETE_QUOTE: self._confirm_delete_quote,
        }[pending.action]
        return handler(pending.payload)

    def _confirm_delete_window_type(self, item_id: str) -> bool:
        return self.editor.remove_window_type(item_id) is not None

    def _confirm_load_quote(self, quote: Quote) -> bool:
        try:
            self.gateway.load_quote(quote, self.editor)
        except QuoteError as exc:
            self.channel.notify(str(exc), "error")
            return False
        self.close_quotes_view()
        self.load_completed = True
        self.channel.notify(f'Loaded "{quote.name}".', "success")
        return True

    def _confirm_delete_quote(self, quote_id: str) -> bool:
        try:
            self.gateway.delete_quote(quote_id)
        except FetchError as exc:
            # the delete went through; only the refresh failed
            self.channel.notify(f"Quote deleted, but the list could not be refreshed: {exc}", "error")
            return True
        except QuoteError as exc:
            self.channel.notify(f"Failed to delete quote: {exc}", "error")
            return False
        self.channel.notify("Quote deleted successfully!", "success")
        return True
