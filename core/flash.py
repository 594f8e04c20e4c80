"""Success/error state handed from one request to the next through the session.

Typical web flow:

    @bp.route('/notes', methods=['POST'])
    def create_note():
        ...
        return flash_success(redirect(url_for('notes.index')), 'Note saved', data={'id': note_id})

    @bp.route('/notes')
    def index():
        state = responsable()
        ...

A write made with ``persist=False`` (the default) is gone after the page
following the redirect; ``persist=True`` keeps it until
``responsable_forget()`` is called.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from schemas.flash import FlashState, ResponseType
from utils.session_store import FlaskSessionStore, SessionStore

logger = logging.getLogger(__name__)

RESPONSE_TYPE_KEY = 'response_type'
MESSAGE_KEY = 'message'
CODE_KEY = 'code'
DATA_KEY = 'data'
ERRORS_KEY = 'errors'

STATE_KEYS = (RESPONSE_TYPE_KEY, MESSAGE_KEY, CODE_KEY, DATA_KEY, ERRORS_KEY)


class FlashStatePersister:
    """Reads and writes the fixed set of flash keys on a session store."""

    def __init__(self, store: SessionStore):
        self.store = store

    def write(
        self,
        response_type: ResponseType | str,
        message: str = '',
        code: int = 200,
        payload: Any = None,
        persist: bool = False,
    ) -> None:
        response_type = ResponseType(response_type)
        write = self.store.put if persist else self.store.flash
        payload_key = DATA_KEY if response_type is ResponseType.SUCCESS else ERRORS_KEY
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode='json', by_alias=True)
        if response_type is ResponseType.ERROR and not isinstance(payload, (Mapping, type(None))):
            raise TypeError(f"error payload must be a mapping, got {type(payload).__name__}")
        if isinstance(payload, Mapping):
            payload = dict(payload)

        write(RESPONSE_TYPE_KEY, response_type.value)
        write(MESSAGE_KEY, message)
        write(CODE_KEY, code)
        write(payload_key, {} if payload is None else payload)
        logger.debug('flash: stored %s state code=%s persist=%s', response_type.value, code, persist)

    def read(self) -> FlashState:
        raw_type = self.store.get(RESPONSE_TYPE_KEY)
        return FlashState(
            type=ResponseType(raw_type) if raw_type else None,
            message=self.store.get(MESSAGE_KEY),
            code=self.store.get(CODE_KEY),
            data=self.store.get(DATA_KEY, {}),
            errors=self.store.get(ERRORS_KEY, {}),
        )

    def clear(self) -> None:
        self.store.forget(STATE_KEYS)
        logger.debug('flash: cleared state keys')


# ---- Flask helpers ----

def _persister() -> FlashStatePersister:
    return FlashStatePersister(FlaskSessionStore())


def flash_success(response, message: str = '', code: int = 200, data: Any = None, persist: bool = False):
    """Stage a success state for the next request and return ``response`` as-is."""
    _persister().write(ResponseType.SUCCESS, message, code, data, persist=persist)
    return response


def flash_error(
    response,
    message: str = '',
    code: int = 422,
    errors: Mapping[str, Any] | None = None,
    persist: bool = False,
):
    """Stage an error state for the next request and return ``response`` as-is."""
    _persister().write(ResponseType.ERROR, message, code, errors, persist=persist)
    return response


def responsable() -> FlashState:
    return _persister().read()


def responsable_forget() -> None:
    _persister().clear()


__all__ = [
    "STATE_KEYS",
    "FlashStatePersister",
    "flash_success",
    "flash_error",
    "responsable",
    "responsable_forget",
]
