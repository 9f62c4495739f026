from __future__ import annotations

from datetime import datetime, timezone

def _now() -> datetime:
    return datetime.now(timezone.utc)

def _key(value: str) -> str:
    return value.strip().lower()
