# -*- coding: utf-8 -*-
from . import getenv_list_or_action, getenv_or_action
from .base import *  # noqa: F401, F403

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", action="ignore", default="INFO")

# CORS configuration
ALLOWED_ORIGINS = getenv_list_or_action("ALLOWED_ORIGINS", action="ignore")
ALLOWED_ORIGINS_REGEX = getenv_or_action("ALLOWED_ORIGINS_REGEX", action="ignore")
if not ALLOWED_ORIGINS and not ALLOWED_ORIGINS_REGEX:
    raise EnvironmentError("ALLOWED_ORIGINS or ALLOWED_ORIGINS_REGEX must be set.")
ALLOWED_METHODS = getenv_list_or_action("ALLOWED_METHODS", action="raise")
ALLOWED_HEADERS = getenv_list_or_action("ALLOWED_HEADERS", action="raise")
ALLOW_CREDENTIALS = (
    getenv_or_action("ALLOW_CREDENTIALS", action="raise").lower() == "true"
)

# Sentry
SENTRY_ENABLE = (
    getenv_or_action("SENTRY_ENABLE", action="ignore", default="false").lower()
    == "true"
)
if SENTRY_ENABLE:
    SENTRY_DSN = getenv_or_action("SENTRY_DSN", action="raise")
    SENTRY_ENVIRONMENT = getenv_or_action("SENTRY_ENVIRONMENT", action="raise")

# Rate limits
RATE_LIMIT_DEFAULT = getenv_or_action("RATE_LIMIT_DEFAULT", action="raise")
RATE_LIMIT_STORAGE_URI = getenv_or_action("RATE_LIMIT_STORAGE_URI", action="raise")

# Dependencies are optional, but warn so a disabled one is visible in the logs
SIGHTENGINE_API_USER = getenv_or_action("SIGHTENGINE_API_USER", action="warn")
SIGHTENGINE_API_SECRET = getenv_or_action("SIGHTENGINE_API_SECRET", action="warn")
ROBOFLOW_API_KEY = getenv_or_action("ROBOFLOW_API_KEY", action="warn")
GEMINI_API_KEY = getenv_or_action("GEMINI_API_KEY", action="warn")
