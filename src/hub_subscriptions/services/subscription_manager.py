"""Subscription store abstraction and its database-backed implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from uuid import UUID

from pydantic import TypeAdapter
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hub_subscriptions.config import get_settings
from hub_subscriptions.config.settings import Policy
from hub_subscriptions.db.session import AsyncSessionLocal
from hub_subscriptions.models.event_kind import EventKind
from hub_subscriptions.models.package_subscription import PackageSubscription
from hub_subscriptions.models.subscription import Subscription
from hub_subscriptions.models.user_subscription import UserSubscription
from hub_subscriptions.repo.subscriptions import (
    delete_subscription,
    get_package_record,
    insert_subscription,
    list_package_subscriptions,
    list_user_subscriptions,
    subscription_exists,
)

logger = logging.getLogger(__name__)

_PACKAGE_SUBSCRIPTIONS = TypeAdapter(list[PackageSubscription])
_USER_SUBSCRIPTIONS = TypeAdapter(list[UserSubscription])


class InvalidInputError(ValueError):
    """The caller supplied data the hub can identify as incorrect."""


@dataclass(frozen=True)
class RequestContext:
    """Authenticated caller on whose behalf the manager acts."""

    user_id: str


class SubscriptionManager(ABC):
    """Operations the subscription handlers need from the store.

    Implementations raise :class:`InvalidInputError` for caller-fixable
    problems; anything else is treated as a server fault.
    """

    @abstractmethod
    async def add(self, ctx: RequestContext, subscription: Subscription) -> None:
        ...

    @abstractmethod
    async def delete(self, ctx: RequestContext, subscription: Subscription) -> None:
        ...

    @abstractmethod
    async def get_by_package_json(self, ctx: RequestContext, package_id: str) -> bytes:
        ...

    @abstractmethod
    async def get_by_user_json(self, ctx: RequestContext) -> bytes:
        ...


def _validate_package_id(value: str) -> str:
    try:
        return str(UUID(value))
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"invalid package id: {value!r}") from exc


def _validate_event_kind(value: int) -> int:
    if not EventKind.is_valid(value):
        raise InvalidInputError(f"invalid event kind: {value!r}")
    return value


class DatabaseSubscriptionManager(SubscriptionManager):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        *,
        duplicate_policy: Policy = "ignore",
        missing_policy: Policy = "ignore",
    ) -> None:
        self._session_factory = session_factory or AsyncSessionLocal
        self._duplicate_policy = duplicate_policy
        self._missing_policy = missing_policy

    async def add(self, ctx: RequestContext, subscription: Subscription) -> None:
        package_id = _validate_package_id(subscription.package_id)
        event_kind = _validate_event_kind(subscription.event_kind)
        async with self._session_factory() as session:
            if await get_package_record(session, package_id) is None:
                raise InvalidInputError(f"package not found: {package_id}")
            if await subscription_exists(
                session,
                user_id=ctx.user_id,
                package_id=package_id,
                event_kind=event_kind,
            ):
                self._on_duplicate(ctx, package_id, event_kind)
                return
            try:
                await insert_subscription(
                    session,
                    user_id=ctx.user_id,
                    package_id=package_id,
                    event_kind=event_kind,
                )
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                # A concurrent add of the same triple wins the primary key; any
                # other violation means the package went away under us.
                if not await subscription_exists(
                    session,
                    user_id=ctx.user_id,
                    package_id=package_id,
                    event_kind=event_kind,
                ):
                    raise InvalidInputError(f"package not found: {package_id}") from exc
                self._on_duplicate(ctx, package_id, event_kind)

    async def delete(self, ctx: RequestContext, subscription: Subscription) -> None:
        package_id = _validate_package_id(subscription.package_id)
        event_kind = _validate_event_kind(subscription.event_kind)
        async with self._session_factory() as session:
            removed = await delete_subscription(
                session,
                user_id=ctx.user_id,
                package_id=package_id,
                event_kind=event_kind,
            )
            await session.commit()
        if removed:
            return
        if self._missing_policy == "reject":
            raise InvalidInputError("subscription not found")
        logger.debug(
            "Ignoring delete of missing subscription user=%s package=%s kind=%s",
            ctx.user_id,
            package_id,
            event_kind,
        )

    async def get_by_package_json(self, ctx: RequestContext, package_id: str) -> bytes:
        package_id = _validate_package_id(package_id)
        async with self._session_factory() as session:
            records = await list_package_subscriptions(
                session,
                user_id=ctx.user_id,
                package_id=package_id,
            )
        return _PACKAGE_SUBSCRIPTIONS.dump_json(
            [PackageSubscription.model_validate(record) for record in records]
        )

    async def get_by_user_json(self, ctx: RequestContext) -> bytes:
        async with self._session_factory() as session:
            records = await list_user_subscriptions(session, user_id=ctx.user_id)
        return _USER_SUBSCRIPTIONS.dump_json(
            [UserSubscription.model_validate(record) for record in records]
        )

    def _on_duplicate(self, ctx: RequestContext, package_id: str, event_kind: int) -> None:
        if self._duplicate_policy == "reject":
            raise InvalidInputError("subscription already exists")
        logger.debug(
            "Ignoring duplicate subscription user=%s package=%s kind=%s",
            ctx.user_id,
            package_id,
            event_kind,
        )


@lru_cache()
def get_subscription_manager() -> SubscriptionManager:
    """Return the process-wide subscription manager."""

    settings = get_settings()
    return DatabaseSubscriptionManager(
        duplicate_policy=settings.duplicate_policy,
        missing_policy=settings.missing_policy,
    )
