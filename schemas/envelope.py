"""Envelope models for JSON API responses.

Success:
    { "status": true, "message": "...", "code": 200, "data": ..., "meta": {...} }
Error:
    { "status": false, "message": "...", "code": 422, "errors": {...} }

``meta`` only exists on success envelopes built with a pagination
descriptor; it is left out of the payload otherwise.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class SuccessEnvelope(BaseModel):
    status: Literal[True] = True
    message: str = ''
    code: int = 200
    data: Any = Field(default_factory=dict)
    meta: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        exclude = {'meta'} if self.meta is None else None
        return self.model_dump(exclude=exclude, by_alias=True)


class ErrorEnvelope(BaseModel):
    status: Literal[False] = False
    message: str = ''
    code: int = 422
    errors: Dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


__all__ = ["SuccessEnvelope", "ErrorEnvelope"]
