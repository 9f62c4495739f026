# coding: utf-8

from typing import List

from pydantic import BaseModel, Field


class TokenModel(BaseModel):
    """Defines a token model for downstream scope enforcement."""

    sub: str
    scopes: List[str] = Field(default_factory=list)
