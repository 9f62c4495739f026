import json

import pytest
from sqlalchemy.exc import IntegrityError

from hub_subscriptions.models.event_kind import EventKind
from hub_subscriptions.models.subscription import Subscription
from hub_subscriptions.repo import subscriptions as subscriptions_repo
from hub_subscriptions.services import subscription_manager
from hub_subscriptions.services.subscription_manager import (
    DatabaseSubscriptionManager,
    InvalidInputError,
    RequestContext,
)

from conftest import OTHER_PACKAGE_ID, PACKAGE_ID, USER_ID

CTX = RequestContext(user_id=USER_ID)


def _subscription(package_id: str = PACKAGE_ID, event_kind: int = EventKind.NEW_RELEASE) -> Subscription:
    return Subscription(package_id=package_id, event_kind=int(event_kind))


@pytest.mark.asyncio
async def test_add_then_read_back(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    await manager.add(CTX, _subscription())
    await manager.add(CTX, _subscription(event_kind=EventKind.SECURITY_ALERT))
    await manager.add(CTX, _subscription(package_id=OTHER_PACKAGE_ID))

    by_package = json.loads(await manager.get_by_package_json(CTX, PACKAGE_ID))
    assert by_package == [{"event_kind": 0}, {"event_kind": 1}]

    by_user = json.loads(await manager.get_by_user_json(CTX))
    assert by_user == [
        {
            "package_id": OTHER_PACKAGE_ID,
            "name": "atlas.dispatch.router",
            "normalized_name": "atlas.dispatch.router",
            "event_kinds": [0],
        },
        {
            "package_id": PACKAGE_ID,
            "name": "orion.llm.chat",
            "normalized_name": "orion.llm.chat",
            "event_kinds": [0, 1],
        },
    ]


@pytest.mark.asyncio
async def test_reads_are_scoped_to_caller(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)
    await manager.add(RequestContext(user_id="someone-else"), _subscription())

    assert json.loads(await manager.get_by_package_json(CTX, PACKAGE_ID)) == []
    assert json.loads(await manager.get_by_user_json(CTX)) == []


@pytest.mark.asyncio
async def test_add_twice_ignored_by_default(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    await manager.add(CTX, _subscription())
    await manager.add(CTX, _subscription())

    assert json.loads(await manager.get_by_package_json(CTX, PACKAGE_ID)) == [{"event_kind": 0}]


@pytest.mark.asyncio
async def test_add_twice_rejected_by_policy(session_factory):
    manager = DatabaseSubscriptionManager(session_factory, duplicate_policy="reject")

    await manager.add(CTX, _subscription())
    with pytest.raises(InvalidInputError):
        await manager.add(CTX, _subscription())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "subscription",
    [
        Subscription(package_id="invalid", event_kind=0),
        Subscription(package_id="", event_kind=0),
        Subscription(package_id=PACKAGE_ID, event_kind=7),
        Subscription(package_id=PACKAGE_ID, event_kind=-1),
        Subscription(package_id="00000000-0000-0000-0000-00000000ffff", event_kind=0),
    ],
    ids=["malformed-id", "empty-id", "unknown-kind", "negative-kind", "unknown-package"],
)
async def test_add_invalid_input(session_factory, subscription):
    manager = DatabaseSubscriptionManager(session_factory)

    with pytest.raises(InvalidInputError):
        await manager.add(CTX, subscription)


@pytest.mark.asyncio
async def test_add_accepts_non_canonical_uuid(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    await manager.add(CTX, _subscription(package_id="{00000000-0000-0000-0000-000000000001}"))

    assert json.loads(await manager.get_by_package_json(CTX, PACKAGE_ID)) == [{"event_kind": 0}]


@pytest.mark.asyncio
async def test_delete_removes_subscription(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)
    await manager.add(CTX, _subscription())

    await manager.delete(CTX, _subscription())

    assert await manager.get_by_package_json(CTX, PACKAGE_ID) == b"[]"
    assert await manager.get_by_user_json(CTX) == b"[]"


@pytest.mark.asyncio
async def test_delete_missing_ignored_by_default(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    await manager.delete(CTX, _subscription())


@pytest.mark.asyncio
async def test_delete_missing_rejected_by_policy(session_factory):
    manager = DatabaseSubscriptionManager(session_factory, missing_policy="reject")

    with pytest.raises(InvalidInputError):
        await manager.delete(CTX, _subscription())


@pytest.mark.asyncio
async def test_delete_invalid_package_id(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    with pytest.raises(InvalidInputError):
        await manager.delete(CTX, Subscription(package_id="invalid", event_kind=0))


@pytest.mark.asyncio
async def test_get_by_package_invalid_id(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    with pytest.raises(InvalidInputError):
        await manager.get_by_package_json(CTX, "packageID")


@pytest.mark.asyncio
async def test_get_by_package_unknown_package(session_factory):
    manager = DatabaseSubscriptionManager(session_factory)

    assert await manager.get_by_package_json(CTX, "00000000-0000-0000-0000-00000000ffff") == b"[]"


@pytest.mark.asyncio
@pytest.mark.parametrize("policy", ["ignore", "reject"])
async def test_add_package_removed_before_insert(session_factory, monkeypatch, policy):
    async def _foreign_key_violation(session, **_):
        raise IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))

    monkeypatch.setattr(subscription_manager, "insert_subscription", _foreign_key_violation)
    manager = DatabaseSubscriptionManager(session_factory, duplicate_policy=policy)

    with pytest.raises(InvalidInputError, match="package not found"):
        await manager.add(CTX, _subscription())


async def _concurrent_duplicate(session, **kwargs):
    await subscriptions_repo.insert_subscription(session, **kwargs)
    await session.commit()
    raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))


@pytest.mark.asyncio
async def test_add_losing_race_ignored_by_default(session_factory, monkeypatch):
    monkeypatch.setattr(subscription_manager, "insert_subscription", _concurrent_duplicate)
    manager = DatabaseSubscriptionManager(session_factory)

    await manager.add(CTX, _subscription())

    assert json.loads(await manager.get_by_package_json(CTX, PACKAGE_ID)) == [{"event_kind": 0}]


@pytest.mark.asyncio
async def test_add_losing_race_rejected_by_policy(session_factory, monkeypatch):
    monkeypatch.setattr(subscription_manager, "insert_subscription", _concurrent_duplicate)
    manager = DatabaseSubscriptionManager(session_factory, duplicate_policy="reject")

    with pytest.raises(InvalidInputError, match="already exists"):
        await manager.add(CTX, _subscription())
