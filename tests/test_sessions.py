"""
Tests for the session manager: minting, validation, listing and revocation.
"""
import pytest

from sessionauth.errors import SessionCreateError
from sessionauth.schemas.sessions import Invalid, NotOwned, Revoked, Valid
from sessionauth.services.sessions import DEFAULT_DEVICE, SessionManager, SessionStore


async def _user(user_store, email="a@x.com"):
    user = await user_store.create_user(email, "hash")
    return user.id


@pytest.mark.asyncio
async def test_create_session_returns_high_entropy_token(session_manager, user_store):
    user_id = await _user(user_store)

    token = await session_manager.create_session(user_id, "Firefox")

    assert len(token) == 32
    int(token, 16)
    assert await session_manager.validate_session(token) == Valid(user_id=user_id)


@pytest.mark.asyncio
async def test_token_bytes_never_below_minimum(database, user_store):
    manager = SessionManager(SessionStore(database), user_store, token_bytes=4)
    user_id = await _user(user_store)

    token = await manager.create_session(user_id, "Firefox")

    assert len(token) == 32


@pytest.mark.asyncio
async def test_device_defaults_when_missing(session_manager, user_store):
    user_id = await _user(user_store)

    await session_manager.create_session(user_id, None)
    sessions = await session_manager.list_sessions(user_id)

    assert [entry.device for entry in sessions] == [DEFAULT_DEVICE]


@pytest.mark.asyncio
async def test_two_sessions_are_distinct_and_independent(session_manager, user_store):
    user_id = await _user(user_store)

    first = await session_manager.create_session(user_id, "Laptop")
    second = await session_manager.create_session(user_id, "Phone")

    assert first != second
    assert await session_manager.revoke_session(first, user_id) == Revoked(session_id=first)
    assert await session_manager.validate_session(first) == Invalid()
    assert await session_manager.validate_session(second) == Valid(user_id=user_id)


@pytest.mark.parametrize("token", [None, "", "does-not-exist"])
@pytest.mark.asyncio
async def test_unknown_token_is_invalid(session_manager, token):
    assert await session_manager.validate_session(token) == Invalid()


@pytest.mark.asyncio
async def test_create_session_for_unknown_user_fails(session_manager):
    with pytest.raises(SessionCreateError):
        await session_manager.create_session(999, "Laptop")


@pytest.mark.asyncio
async def test_token_collision_fails_loudly_without_overwriting(session_manager, user_store, monkeypatch):
    owner = await _user(user_store, "a@x.com")
    other = await _user(user_store, "b@x.com")
    monkeypatch.setattr(session_manager, "_new_token", lambda: "f" * 32)

    token = await session_manager.create_session(owner, "Laptop")
    with pytest.raises(SessionCreateError):
        await session_manager.create_session(other, "Phone")

    assert await session_manager.validate_session(token) == Valid(user_id=owner)
    assert await session_manager.list_sessions(other) == []


@pytest.mark.asyncio
async def test_list_sessions_only_returns_own_sessions(session_manager, user_store):
    alice = await _user(user_store, "a@x.com")
    bob = await _user(user_store, "b@x.com")
    alice_tokens = {
        await session_manager.create_session(alice, "Laptop"),
        await session_manager.create_session(alice, "Phone"),
    }
    bob_token = await session_manager.create_session(bob, "Tablet")

    alice_sessions = await session_manager.list_sessions(alice)

    assert {entry.id for entry in alice_sessions} == alice_tokens
    assert all(entry.user_id == alice for entry in alice_sessions)
    assert bob_token not in {entry.id for entry in alice_sessions}
    assert all(entry.created_at is not None for entry in alice_sessions)


@pytest.mark.asyncio
async def test_revoke_foreign_session_is_not_owned_and_keeps_it(session_manager, user_store):
    alice = await _user(user_store, "a@x.com")
    bob = await _user(user_store, "b@x.com")
    bob_token = await session_manager.create_session(bob, "Tablet")

    outcome = await session_manager.revoke_session(bob_token, alice)

    assert outcome == NotOwned(session_id=bob_token)
    assert await session_manager.validate_session(bob_token) == Valid(user_id=bob)


@pytest.mark.asyncio
async def test_revoke_missing_session_is_not_owned(session_manager, user_store):
    alice = await _user(user_store)

    assert isinstance(await session_manager.revoke_session("missing", alice), NotOwned)
    assert isinstance(await session_manager.revoke_session(None, alice), NotOwned)


@pytest.mark.asyncio
async def test_revoke_current_session_is_unconditional_and_idempotent(session_manager, user_store):
    user_id = await _user(user_store)
    token = await session_manager.create_session(user_id, "Laptop")

    await session_manager.revoke_current_session(token)
    await session_manager.revoke_current_session(token)

    assert await session_manager.validate_session(token) == Invalid()
