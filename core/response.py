"""Response helper utilities for consistent API envelopes.

All API endpoints should return one of these two structures:
{
    "status": true,
    "message": "...",
    "code": 200,
    "data": <payload>,
    "meta": { pagination, only for paged listings }
}
{
    "status": false,
    "message": "...",
    "code": 422,
    "errors": { field: detail }
}

``build_*`` return plain dicts; ``json_*`` wrap them for a Flask view with
the HTTP status set to ``code``.
"""
from __future__ import annotations

from flask import jsonify
from pydantic import BaseModel
from typing import Any, Mapping

from schemas.envelope import ErrorEnvelope, SuccessEnvelope
from schemas.pagination import as_pagination


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode='json', by_alias=True)
    return data


def build_success(message: str = '', data: Any = None, code: int = 200, pagination: Any = None) -> dict:
    meta = as_pagination(pagination).meta() if pagination is not None else None
    envelope = SuccessEnvelope(
        message=message,
        code=code,
        data={} if data is None else _dump(data),
        meta=meta,
    )
    return envelope.to_payload()


def build_error(message: str = '', code: int = 422, errors: Mapping[str, Any] | None = None) -> dict:
    envelope = ErrorEnvelope(message=message, code=code, errors=dict(errors or {}))
    return envelope.to_payload()


def json_success(message: str = '', data: Any = None, code: int = 200, pagination: Any = None):
    payload = build_success(message=message, data=data, code=code, pagination=pagination)
    return jsonify(payload), code


def json_error(message: str = '', code: int = 422, errors: Mapping[str, Any] | None = None):
    payload = build_error(message=message, code=code, errors=errors)
    return jsonify(payload), code


__all__ = ["build_success", "build_error", "json_success", "json_error"]
