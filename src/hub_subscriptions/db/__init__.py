"""Hub subscription database helpers."""

from .base import Base
from .session import (
    ASYNC_DATABASE_URL,
    DATABASE_URL,
    AsyncSessionLocal,
    SessionLocal,
    async_engine,
    engine,
)

__all__ = [
    "Base",
    "DATABASE_URL",
    "ASYNC_DATABASE_URL",
    "SessionLocal",
    "AsyncSessionLocal",
    "engine",
    "async_engine",
]
