"""Custom exception types for service layer.

Services raise these; the ``Responsable`` error handlers translate them
into error envelopes (JSON) or flashed error state (web redirects).
"""
from __future__ import annotations

from typing import Any, Mapping


class ServiceError(Exception):
    """Base service layer exception."""

    code = 400
    default_message = 'Request could not be processed.'

    def __init__(self, message: str | None = None, *, errors: Mapping[str, Any] | None = None, code: int | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = dict(errors or {})
        if code is not None:
            self.code = code


class ValidationError(ServiceError):
    """Input validation failed."""

    code = 422
    default_message = 'The given data was invalid.'


class NotFoundError(ServiceError):
    """Entity not found."""

    code = 404
    default_message = 'Not found.'


class ConflictError(ServiceError):
    """Conflict (duplicate / invariant violation)."""

    code = 409
    default_message = 'Conflict.'


def errors_from_pydantic(err) -> dict:
    """Group a ``pydantic.ValidationError`` into ``{"field.path": [messages]}``."""
    grouped: dict[str, list[str]] = {}
    for e in err.errors():
        field = '.'.join(str(x) for x in e.get('loc', ())) or '__root__'
        grouped.setdefault(field, []).append(e.get('msg', 'Invalid value'))
    return grouped


__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "errors_from_pydantic",
]
