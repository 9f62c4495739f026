"""Seed the subscriptions database with development accounts and packages."""

from __future__ import annotations

from sqlalchemy import select

from hub_subscriptions.config import get_settings
from hub_subscriptions.repo.common import _key
from .models import HubPackage, HubToken, HubUser
from .session import SessionLocal

DEFAULT_USERS = [
    {"id": "hub-user", "username": "hub-user", "display_name": "Hub Subscriber"},
    {"id": "astra-labs", "username": "astra-labs", "display_name": "Astra Labs"},
]

DEFAULT_TOKENS = [
    {
        "id": "hub-default-token",
        "owner_id": "hub-user",
        "label": "default-dev",
        "scopes": ["read", "subscribe"],
        "token": "hub-user-token",
    },
]

DEFAULT_PACKAGES = [
    {"id": "00000000-0000-0000-0000-000000000001", "name": "orion.llm.chat"},
    {"id": "00000000-0000-0000-0000-000000000002", "name": "pulse.metrics.stream"},
    {"id": "00000000-0000-0000-0000-000000000003", "name": "atlas.dispatch.router"},
    {"id": "00000000-0000-0000-0000-000000000004", "name": "vector.trace.kit"},
]


def seed_default_accounts() -> None:
    if not get_settings().seed_sample_data:
        return

    with SessionLocal() as session:
        for user in DEFAULT_USERS:
            if session.get(HubUser, user["id"]):
                continue
            session.add(
                HubUser(
                    id=user["id"],
                    username=user["username"],
                    display_name=user["display_name"],
                )
            )
        session.commit()

        for token in DEFAULT_TOKENS:
            token_exists = session.execute(
                select(HubToken).where(HubToken.token == token["token"])
            ).scalar_one_or_none()
            if token_exists:
                continue
            session.add(HubToken(**token))
        session.commit()


def seed_sample_packages() -> None:
    if not get_settings().seed_sample_data:
        return

    with SessionLocal() as session:
        has_packages = session.execute(select(HubPackage.id).limit(1)).first()
        if has_packages:
            return
        for package in DEFAULT_PACKAGES:
            session.add(
                HubPackage(
                    id=package["id"],
                    name=package["name"],
                    normalized_name=_key(package["name"]),
                )
            )
        session.commit()
