"""Application configuration loaded from environment.

Keep development-friendly defaults here, but always set secure/production
values via environment variables.
"""

import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()


def _env_flag(name, default="0"):
    return str(os.getenv(name, default)).lower() in {"1", "true", "yes", "on"}


class Config:
    # Signs the session cookie that carries flashed response state. MUST be
    # set for production.
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    # Include tracebacks in 500 error envelopes.
    SHOW_DETAILED_ERRORS = _env_flag("SHOW_DETAILED_ERRORS")

    # Standard logging level name for app.logger.
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Expire flashed session keys one request after they were written.
    # Disable only if another layer already ages the session.
    RESPONSABLE_AGE_FLASH = _env_flag("RESPONSABLE_AGE_FLASH", "1")

    # Register the JSON/flash error handlers on the app.
    RESPONSABLE_HANDLE_ERRORS = _env_flag("RESPONSABLE_HANDLE_ERRORS", "1")

    # Session / cookie defaults. Durable (persist=True) state lives as long
    # as the session itself.
    PERMANENT_SESSION_DAYS = int(os.getenv("PERMANENT_SESSION_DAYS", "30"))
    PERMANENT_SESSION_LIFETIME = timedelta(days=PERMANENT_SESSION_DAYS)

    # SESSION_COOKIE_SECURE should be enabled in production (HTTPS).
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE")
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
