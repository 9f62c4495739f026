"""SQLAlchemy models for hub subscription persistence."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class HubUser(Base):
    __tablename__ = "hub_users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    display_name: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)

    tokens: Mapped[list["HubToken"]] = relationship(
        "HubToken",
        back_populates="owner",
        cascade="all, delete-orphan",
    )


class HubToken(Base):
    __tablename__ = "hub_tokens"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("hub_users.id", ondelete="CASCADE"),
        index=True,
    )
    label: Mapped[str] = mapped_column(String(128))
    scopes: Mapped[list[str]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    last_used_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    token: Mapped[str] = mapped_column(String(128), unique=True, index=True)

    owner: Mapped[HubUser] = relationship("HubUser", back_populates="tokens")


class HubPackage(Base):
    __tablename__ = "hub_packages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    normalized_name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)

    subscriptions: Mapped[list["HubSubscription"]] = relationship(
        "HubSubscription",
        back_populates="package",
        cascade="all, delete-orphan",
    )


class HubSubscription(Base):
    __tablename__ = "hub_subscriptions"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    package_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("hub_packages.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    event_kind: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)

    package: Mapped[HubPackage] = relationship("HubPackage", back_populates="subscriptions")
