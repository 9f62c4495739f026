"""Cache-Control helpers shared by read endpoints."""

from __future__ import annotations


def build_cache_control_header(max_age: int | float) -> str:
    """Render a ``Cache-Control`` value allowing caching for ``max_age`` seconds.

    Caller-scoped payloads use ``max_age=0`` so intermediaries revalidate on
    every request.
    """

    seconds = max(int(max_age), 0)
    return f"max-age={seconds}"
