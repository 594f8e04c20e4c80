"""Flask extension wiring the response helpers into an application.

    responsable = Responsable()
    responsable.init_app(app)

Registers:
- an ``after_request`` hook expiring flashed session keys one request
  after they were written;
- ``responsable()`` as a Jinja global for templates rendering flash state;
- error handlers turning exceptions into error envelopes.
"""
from __future__ import annotations

import traceback
from urllib.parse import urlsplit

from flask import Flask, current_app, redirect, request, session
from werkzeug.exceptions import HTTPException, InternalServerError

from core.errors import ServiceError
from core.flash import flash_error, responsable
from core.response import json_error
from utils.session_store import FlaskSessionStore


def _wants_json_response() -> bool:
    if request.is_json:
        return True
    best = request.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json' and request.accept_mimetypes[best] > request.accept_mimetypes['text/html']


def _same_host_referrer() -> str | None:
    referrer = request.referrer
    if referrer and urlsplit(referrer).netloc == request.host:
        return referrer
    return None


def _age_flash_data(response):
    if not current_app.config.get('RESPONSABLE_AGE_FLASH', True):
        return response
    # Cookie-less requests that wrote nothing have no session to age
    cookie_name = current_app.session_interface.get_cookie_name(current_app)
    if cookie_name not in request.cookies and not session.modified:
        return response
    FlaskSessionStore().age_flash_data()
    return response


def handle_service_error(err: ServiceError):
    current_app.logger.info(f"{request.method} {request.path} -> {err.code}: {err.message}")
    referrer = _same_host_referrer()
    if not _wants_json_response() and referrer:
        return flash_error(redirect(referrer), err.message, err.code, err.errors)
    return json_error(err.message, code=err.code, errors=err.errors)


def handle_http_exception(err: HTTPException):
    if not _wants_json_response():
        return err
    return json_error(err.description or err.name, code=err.code or 500)


def handle_any_exception(err: Exception):
    show_details = current_app.debug or current_app.config.get('SHOW_DETAILED_ERRORS')
    tb_str = ''
    if show_details:
        tb_str = ''.join(traceback.format_exception(type(err), err, err.__traceback__))
        current_app.logger.error(f"Unhandled exception: {tb_str}")
    else:
        current_app.logger.error(f"Unhandled exception: {err}")

    if not _wants_json_response():
        return InternalServerError(original_exception=err)
    errors = {'traceback': tb_str} if show_details else {}
    return json_error('An unexpected error occurred.', code=500, errors=errors)


class Responsable:
    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.config.setdefault('RESPONSABLE_AGE_FLASH', True)
        app.config.setdefault('RESPONSABLE_HANDLE_ERRORS', True)
        app.config.setdefault('SHOW_DETAILED_ERRORS', False)

        app.after_request(_age_flash_data)
        app.add_template_global(responsable, 'responsable')

        if app.config['RESPONSABLE_HANDLE_ERRORS']:
            app.register_error_handler(ServiceError, handle_service_error)
            app.register_error_handler(HTTPException, handle_http_exception)
            app.register_error_handler(Exception, handle_any_exception)

        app.extensions['responsable'] = self


__all__ = ["Responsable"]
