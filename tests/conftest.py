"""Shared fixtures.

``app`` is the real factory output with a few throwaway routes that drive
the redirect/flash flow and the error handlers. ``store`` is a plain
dict-backed session store; calling ``store.age_flash_data()`` stands in for
a request boundary.
"""
from __future__ import annotations

import pytest
from flask import jsonify, redirect, render_template_string, request, url_for
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydValidationError

from app import create_app
from config import Config
from core.errors import NotFoundError, ValidationError, errors_from_pydantic
from core.flash import flash_error, flash_success, responsable, responsable_forget
from core.response import json_success
from schemas.pagination import LengthAwarePage
from utils.session_store import MappingSessionStore


class AppTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SHOW_DETAILED_ERRORS = False


class NotePayload(BaseModel):
    title: str = Field(..., min_length=3)
    body: str = ""


def _state_dict():
    return responsable().model_dump(mode="json")


@pytest.fixture
def app():
    app = create_app(AppTestConfig)

    @app.route("/notes", methods=["POST"])
    def save_note():
        persist = request.args.get("persist") == "1"
        return flash_success(redirect(url_for("show_state")), "Note saved", 201, {"id": 7}, persist=persist)

    @app.route("/notes/fail", methods=["POST"])
    def fail_note():
        return flash_error(redirect(url_for("show_state")), "Title missing", errors={"title": ["required"]})

    @app.route("/state")
    def show_state():
        return jsonify(_state_dict())

    @app.route("/state/forget", methods=["POST"])
    def forget_state():
        responsable_forget()
        return jsonify(_state_dict())

    @app.route("/state/html")
    def state_html():
        return render_template_string(
            "{% set s = responsable() %}{{ s.type.value if s.type else 'none' }}|{{ s.message or '' }}"
        )

    @app.route("/api/notes")
    def list_notes():
        items = [{"id": i} for i in range(1, 4)]
        return json_success("Notes", items, pagination=LengthAwarePage.build(total=23, per_page=3, current_page=2))

    @app.route("/api/notes/<int:note_id>")
    def get_note(note_id):
        raise NotFoundError("Note not found")

    @app.route("/api/notes/validate", methods=["POST"])
    def validate_note():
        try:
            NotePayload(**(request.get_json(silent=True) or {}))
        except PydValidationError as ve:
            raise ValidationError(errors=errors_from_pydantic(ve))
        return json_success("Valid")

    @app.route("/api/notes/mistyped")
    def mistyped_page():
        return json_success("Notes", [], pagination={"kind": "lenght_aware", "per_page": 10})

    @app.route("/notes/check", methods=["POST"])
    def check_note():
        raise ValidationError("Check failed", errors={"body": ["too short"]})

    @app.route("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store():
    return MappingSessionStore({})
