# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, Literal

from pydantic import BaseModel, Field, StrictStr
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class HealthStatus(BaseModel):
    """
    HealthStatus
    """  # noqa: E501

    status: Literal["ok", "degraded"]
    version: StrictStr
    timestamp: datetime = Field(description="Time the probe was evaluated.")
    __properties: ClassVar[list[str]] = ["status", "version", "timestamp"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
