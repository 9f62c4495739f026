from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hub_subscriptions.db.models import HubPackage, HubSubscription
from hub_subscriptions.repo.common import _now

def _package_from_model(package: HubPackage) -> dict[str, Any]:
    return {
        "id": package.id,
        "name": package.name,
        "normalizedName": package.normalized_name,
    }

async def get_package_record(session: AsyncSession, package_id: str) -> dict[str, Any] | None:
    package = await session.get(HubPackage, package_id)
    if package is None:
        return None
    return _package_from_model(package)

async def subscription_exists(
    session: AsyncSession,
    *,
    user_id: str,
    package_id: str,
    event_kind: int,
) -> bool:
    record = await session.get(HubSubscription, (user_id, package_id, event_kind))
    return record is not None

async def insert_subscription(
    session: AsyncSession,
    *,
    user_id: str,
    package_id: str,
    event_kind: int,
) -> None:
    session.add(
        HubSubscription(
            user_id=user_id,
            package_id=package_id,
            event_kind=event_kind,
            created_at=_now(),
        )
    )
    await session.flush()

async def delete_subscription(
    session: AsyncSession,
    *,
    user_id: str,
    package_id: str,
    event_kind: int,
) -> int:
    result = await session.execute(
        delete(HubSubscription).where(
            HubSubscription.user_id == user_id,
            HubSubscription.package_id == package_id,
            HubSubscription.event_kind == event_kind,
        )
    )
    return result.rowcount or 0

async def list_package_subscriptions(
    session: AsyncSession,
    *,
    user_id: str,
    package_id: str,
) -> list[dict[str, Any]]:
    rows = await session.execute(
        select(HubSubscription.event_kind)
        .where(
            HubSubscription.user_id == user_id,
            HubSubscription.package_id == package_id,
        )
        .order_by(HubSubscription.event_kind)
    )
    return [{"event_kind": event_kind} for event_kind in rows.scalars()]

async def list_user_subscriptions(session: AsyncSession, *, user_id: str) -> list[dict[str, Any]]:
    rows = await session.execute(
        select(
            HubPackage.id,
            HubPackage.name,
            HubPackage.normalized_name,
            HubSubscription.event_kind,
        )
        .join(HubPackage, HubPackage.id == HubSubscription.package_id)
        .where(HubSubscription.user_id == user_id)
        .order_by(HubPackage.name, HubSubscription.event_kind)
    )
    by_package: dict[str, dict[str, Any]] = {}
    for package_id, name, normalized_name, event_kind in rows.all():
        entry = by_package.setdefault(
            package_id,
            {
                "package_id": package_id,
                "name": name,
                "normalized_name": normalized_name,
                "event_kinds": [],
            },
        )
        entry["event_kinds"].append(event_kind)
    return list(by_package.values())
