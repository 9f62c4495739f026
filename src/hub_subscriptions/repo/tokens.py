from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hub_subscriptions.db.models import HubToken
from hub_subscriptions.db.session import AsyncSessionLocal
from hub_subscriptions.repo.common import _now

def _as_aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip.
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

async def resolve_token(
    token_value: str,
    *,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> tuple[str, list[str]]:
    async with session_factory() as session:
        token = (
            await session.execute(select(HubToken).where(HubToken.token == token_value))
        ).scalar_one_or_none()
        if token is None:
            raise ValueError("invalid_token")
        if token.expires_at and _as_aware(token.expires_at) < _now():
            raise ValueError("invalid_token")
        token.last_used_at = _now()
        await session.commit()
        return token.owner_id, list(token.scopes or [])
