# coding: utf-8

import os
import tempfile
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="hub-subscriptions-tests-"))
os.environ.setdefault("HUB_SUBSCRIPTIONS_DATABASE_URL", f"sqlite:///{(_TEST_DB_DIR / 'test.db').as_posix()}")
os.environ.setdefault("HUB_SUBSCRIPTIONS_AUTO_MIGRATE", "false")
os.environ.setdefault("HUB_SUBSCRIPTIONS_SEED_SAMPLE_DATA", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI, Request  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hub_subscriptions.app import create_app  # noqa: E402
from hub_subscriptions.db.base import Base  # noqa: E402
from hub_subscriptions.db.models import HubPackage  # noqa: E402
from hub_subscriptions.models.extra_models import TokenModel  # noqa: E402
from hub_subscriptions.security_api import USER_ID_KEY, get_token_bearerAuth  # noqa: E402
from hub_subscriptions.services.subscription_manager import (  # noqa: E402
    SubscriptionManager,
    get_subscription_manager,
)

USER_ID = "userID"
PACKAGE_ID = "00000000-0000-0000-0000-000000000001"
OTHER_PACKAGE_ID = "00000000-0000-0000-0000-000000000002"


class ManagerMock(SubscriptionManager):
    """Records every call and answers with scripted results."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self._scripted: dict[str, tuple[object, BaseException | None]] = {}

    def on(self, method: str, result: object = None, error: BaseException | None = None) -> None:
        self._scripted[method] = (result, error)

    async def _call(self, method: str, *args):
        self.calls.append((method, *args))
        if method not in self._scripted:
            raise AssertionError(f"unexpected call to {method}")
        result, error = self._scripted[method]
        if error is not None:
            raise error
        return result

    async def add(self, ctx, subscription):
        await self._call("add", ctx, subscription)

    async def delete(self, ctx, subscription):
        await self._call("delete", ctx, subscription)

    async def get_by_package_json(self, ctx, package_id):
        return await self._call("get_by_package_json", ctx, package_id)

    async def get_by_user_json(self, ctx):
        return await self._call("get_by_user_json", ctx)


async def _authenticated_caller(request: Request) -> TokenModel:
    setattr(request.state, USER_ID_KEY, USER_ID)
    return TokenModel(sub=USER_ID, scopes=["read", "subscribe"])


@pytest.fixture
def manager() -> ManagerMock:
    return ManagerMock()


@pytest.fixture
def app(manager: ManagerMock) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_subscription_manager] = lambda: manager
    application.dependency_overrides[get_token_bearerAuth] = _authenticated_caller
    return application


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [
                HubPackage(id=PACKAGE_ID, name="orion.llm.chat", normalized_name="orion.llm.chat"),
                HubPackage(
                    id=OTHER_PACKAGE_ID,
                    name="atlas.dispatch.router",
                    normalized_name="atlas.dispatch.router",
                ),
            ]
        )
        await session.commit()
    yield factory
    await engine.dispose()
