# windowquote/auth.py
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from .db import get_session
from .db_models import UserAccount, new_doc_id
from .errors import AuthError, AuthNotReadyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    uid: str
    is_anonymous: bool


Listener = Callable[[Optional[Identity]], None]


class IdentityProvider:
    """
    Minimal account service backed by the user_account table.

    Listeners registered with on_identity_changed() are called right away
    with the current identity and again after every sign-in or sign-out.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.current: Optional[Identity] = None
        self._listeners: List[Listener] = []

    def on_identity_changed(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        listener(self.current)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_current(self, identity: Optional[Identity]) -> None:
        self.current = identity
        for listener in list(self._listeners):
            listener(identity)

    def issue_token(self, uid: Optional[str] = None) -> str:
        """Create (or re-key) a non-anonymous account and return its sign-in token."""
        token = secrets.token_urlsafe(24)
        with get_session(self.engine) as s:
            account = s.get(UserAccount, uid) if uid else None
            if account is None:
                account = UserAccount(uid=uid or new_doc_id())
            account.token = token
            account.is_anonymous = False
            s.add(account)
            s.commit()
        return token

    def sign_in_anonymously(self) -> Identity:
        with get_session(self.engine) as s:
            account = UserAccount(is_anonymous=True)
            s.add(account)
            s.commit()
            identity = Identity(uid=account.uid, is_anonymous=True)
        logger.info("Signed in anonymously as %s", identity.uid, extra={"owner_id": identity.uid})
        self._set_current(identity)
        return identity

    def sign_in_with_token(self, token: str) -> Identity:
        with get_session(self.engine) as s:
            account = s.exec(select(UserAccount).where(UserAccount.token == token)).first()
            if account is None:
                raise AuthError("Invalid sign-in token.")
            identity = Identity(uid=account.uid, is_anonymous=account.is_anonymous)
        logger.info("Signed in with custom token as %s", identity.uid, extra={"owner_id": identity.uid})
        self._set_current(identity)
        return identity

    def sign_out(self) -> None:
        self._set_current(None)


class IdentityGate:
    """
    One-time readiness gate in front of the provider.

    The first identity callback either records the signed-in user or, when
    nobody is signed in, signs in with the bootstrap token (anonymously if
    there is none). `ready` turns True after that first callback even when
    sign-in failed; the failure is kept in `error`.
    """

    def __init__(self, provider: IdentityProvider, bootstrap_token: Optional[str] = None):
        self.provider = provider
        self.bootstrap_token = bootstrap_token
        self.ready = False
        self.user_id: Optional[str] = None
        self.error: Optional[Exception] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def start(self) -> "IdentityGate":
        if self._unsubscribe is None:
            self._unsubscribe = self.provider.on_identity_changed(self._handle)
        return self

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _handle(self, identity: Optional[Identity]) -> None:
        if identity is not None:
            self.user_id = identity.uid
            self.ready = True
            return
        self.user_id = None
        if self.ready:
            # signed out after the gate already fired; nothing to bootstrap
            return
        try:
            if self.bootstrap_token:
                self.provider.sign_in_with_token(self.bootstrap_token)
            else:
                self.provider.sign_in_anonymously()
        except Exception as exc:
            logger.exception("Authentication failed")
            self.error = exc
        finally:
            self.ready = True

    def require_user(self, message: str = "Please wait for authentication to complete.") -> str:
        if not self.ready or not self.user_id:
            raise AuthNotReadyError(message)
        return self.user_id
