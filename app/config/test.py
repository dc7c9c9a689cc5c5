# -*- coding: utf-8 -*-
"""Test configuration with every external dependency disabled and safe defaults."""

from .base import *  # noqa: F401, F403

# Environment
environment = "test"

# Logging
LOG_LEVEL = "DEBUG"

# Sentry (disabled for tests)
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# CORS configuration
ALLOWED_ORIGINS = ["*"]
ALLOWED_ORIGINS_REGEX = None
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type"]
ALLOW_CREDENTIALS = False

# Rate limits (more permissive for tests)
RATE_LIMIT_DEFAULT = "10000/second"
RATE_LIMIT_STORAGE_URI = "memory://"

# External services start disabled; tests enable them explicitly
SIGHTENGINE_BASE_URL = "https://sightengine.test/1.0"
SIGHTENGINE_API_USER = None
SIGHTENGINE_API_SECRET = None
SIGHTENGINE_TIMEOUT = 1.0

ROBOFLOW_WORKFLOW_URL = "https://roboflow.test/workflows/text-recognition"
ROBOFLOW_API_KEY = None
ROBOFLOW_TIMEOUT = 1.0

GEMINI_BASE_URL = "https://gemini.test/v1beta"
GEMINI_API_KEY = None
GEMINI_MODEL = "gemini-test"
GEMINI_TIMEOUT = 1.0
GEMINI_MAX_ATTEMPTS = 2

MEDIA_FETCH_TIMEOUT = 1.0
MEDIA_MAX_BYTES = 1024 * 1024
