from datetime import timedelta

import pytest

from hub_subscriptions.db.models import HubToken, HubUser
from hub_subscriptions.repo.common import _now
from hub_subscriptions.repo.tokens import resolve_token


async def _store_token(session_factory, owner_id, token, scopes, expires_at=None):
    async with session_factory() as session:
        session.add(HubUser(id=owner_id, username=owner_id))
        session.add(
            HubToken(
                id=f"{owner_id}-token",
                owner_id=owner_id,
                label="cli",
                scopes=scopes,
                token=token,
                expires_at=expires_at,
            )
        )
        await session.commit()


@pytest.mark.asyncio
async def test_resolve_stored_token(session_factory):
    await _store_token(session_factory, "alice", "tok_alice", ["read", "subscribe"])

    owner_id, scopes = await resolve_token("tok_alice", session_factory=session_factory)

    assert owner_id == "alice"
    assert scopes == ["read", "subscribe"]


@pytest.mark.asyncio
async def test_resolve_unknown_token(session_factory):
    with pytest.raises(ValueError):
        await resolve_token("tok_missing", session_factory=session_factory)


@pytest.mark.asyncio
async def test_resolve_expired_token(session_factory):
    await _store_token(
        session_factory,
        "bob",
        "tok_bob",
        ["read"],
        expires_at=_now() - timedelta(minutes=5),
    )

    with pytest.raises(ValueError):
        await resolve_token("tok_bob", session_factory=session_factory)
