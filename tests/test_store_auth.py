import pytest

from windowquote.auth import IdentityGate, IdentityProvider
from windowquote.errors import AuthError, AuthNotReadyError

COLL = "artifacts/test-app/public/data/quotes"


# ---- store -------------------------------------------------------------------

def test_store_assigns_id_and_timestamp(store):
    q = store.add(COLL, name="Job", line_items=[], total_cost=0.0, owner_id="u1")
    assert q.id
    assert q.saved_at.tzinfo is not None
    assert store.get(COLL, q.id) == q


def test_store_scopes_by_collection(store):
    q = store.add(COLL, name="Job", line_items=[], total_cost=0.0, owner_id="u1")
    other = "artifacts/other/public/data/quotes"
    assert store.get(other, q.id) is None
    assert not store.delete(other, q.id)
    assert store.delete(COLL, q.id)
    assert store.get(COLL, q.id) is None


# ---- identity ------------------------------------------------------------------

def test_listener_gets_current_identity_immediately(provider):
    seen = []
    provider.on_identity_changed(seen.append)
    assert seen == [None]


def test_unsubscribe_stops_callbacks(provider):
    seen = []
    unsubscribe = provider.on_identity_changed(seen.append)
    unsubscribe()
    provider.sign_in_anonymously()
    assert seen == [None]


def test_gate_signs_in_anonymously(provider):
    gate = IdentityGate(provider)
    assert not gate.ready
    with pytest.raises(AuthNotReadyError):
        gate.require_user()
    gate.start()
    assert gate.ready
    assert gate.require_user() == provider.current.uid
    assert provider.current.is_anonymous


def test_gate_uses_bootstrap_token(provider):
    token = provider.issue_token("installer-7")
    gate = IdentityGate(provider, bootstrap_token=token).start()
    assert gate.user_id == "installer-7"
    assert not provider.current.is_anonymous


def test_gate_is_ready_even_when_sign_in_fails(provider):
    gate = IdentityGate(provider, bootstrap_token="not-issued").start()
    assert gate.ready
    assert isinstance(gate.error, AuthError)
    with pytest.raises(AuthNotReadyError):
        gate.require_user()


def test_gate_keeps_existing_identity(provider):
    existing = provider.sign_in_anonymously()
    gate = IdentityGate(provider).start()
    assert gate.user_id == existing.uid


def test_sign_out_after_ready_does_not_re_sign_in(provider):
    gate = IdentityGate(provider).start()
    provider.sign_out()
    assert gate.ready and gate.user_id is None
    assert provider.current is None


def test_unknown_token_raises(engine):
    with pytest.raises(AuthError):
        IdentityProvider(engine).sign_in_with_token("bogus")
