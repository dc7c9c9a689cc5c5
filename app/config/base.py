# -*- coding: utf-8 -*-
from . import getenv_list_or_action, getenv_or_action

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", action="ignore", default="INFO")

# Sentry
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# CORS configuration
ALLOWED_ORIGINS = getenv_list_or_action("ALLOWED_ORIGINS", action="ignore", default="*")
ALLOWED_ORIGINS_REGEX = None
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type"]
ALLOW_CREDENTIALS = False

# Rate limits
RATE_LIMIT_DEFAULT = getenv_or_action(
    "RATE_LIMIT_DEFAULT", action="ignore", default="60/minute"
)
RATE_LIMIT_STORAGE_URI = getenv_or_action(
    "RATE_LIMIT_STORAGE_URI", action="ignore", default="memory://"
)

# Media fetch
MEDIA_FETCH_TIMEOUT = float(getenv_or_action("MEDIA_FETCH_TIMEOUT", default="20"))
MEDIA_MAX_BYTES = int(getenv_or_action("MEDIA_MAX_BYTES", default=str(25 * 1024 * 1024)))
MEDIA_DEFAULT_MIME_TYPE = "image/jpeg"

# Sightengine (authenticity check). Missing credentials disable the check.
SIGHTENGINE_BASE_URL = getenv_or_action(
    "SIGHTENGINE_BASE_URL", default="https://api.sightengine.com/1.0"
).rstrip("/")
SIGHTENGINE_API_USER = getenv_or_action("SIGHTENGINE_API_USER", action="ignore")
SIGHTENGINE_API_SECRET = getenv_or_action("SIGHTENGINE_API_SECRET", action="ignore")
SIGHTENGINE_MODELS = getenv_or_action("SIGHTENGINE_MODELS", default="genai")
SIGHTENGINE_TIMEOUT = float(getenv_or_action("SIGHTENGINE_TIMEOUT", default="10"))

# Roboflow (plate reading). Missing key disables the reader.
ROBOFLOW_WORKFLOW_URL = getenv_or_action(
    "ROBOFLOW_WORKFLOW_URL",
    default="https://serverless.roboflow.com/madhus/workflows/text-recognition",
)
ROBOFLOW_API_KEY = getenv_or_action("ROBOFLOW_API_KEY", action="ignore")
ROBOFLOW_TIMEOUT = float(getenv_or_action("ROBOFLOW_TIMEOUT", default="15"))

# Gemini (violation classification)
GEMINI_BASE_URL = getenv_or_action(
    "GEMINI_BASE_URL", default="https://generativelanguage.googleapis.com/v1beta"
).rstrip("/")
GEMINI_API_KEY = getenv_or_action("GEMINI_API_KEY", action="ignore")
GEMINI_MODEL = getenv_or_action("GEMINI_MODEL", default="gemini-2.0-flash")
GEMINI_TIMEOUT = float(getenv_or_action("GEMINI_TIMEOUT", default="30"))
GEMINI_MAX_ATTEMPTS = int(getenv_or_action("GEMINI_MAX_ATTEMPTS", default="2"))

# Scoring
VIOLATION_SEVERITY_WEIGHTS = {
    "no_helmet": 0.6,
    "signal_jumping": 0.9,
    "wrong_side_driving": 1.0,
    "zebra_crossing_violation": 0.4,
    "illegal_parking": 0.3,
}
FAILED_ANALYSIS_PRIORITY_BASELINE = 0.2
AUTHENTICITY_DEFAULT_SCORE = 1.0
AUTHENTICITY_SERVICE_FAILURE_SCORE = 0.95

# Plate heuristics
PLATE_MIN_LENGTH = 7
PLATE_MAX_LENGTH = 11
PLATE_PLAUSIBLE_PATTERN = r"[A-Z]{2}[0-9]"
PLATE_REGIONAL_PATTERN = r"[A-Z]{2}[0-9]{1,2}[A-Z]{1,2}[0-9]{4}"
PLATE_TEXT_FIELD = "text"
PLATE_TEXT_MIN_LENGTH = 6
PLATE_SEARCH_MAX_DEPTH = 32
PLATE_SEARCH_MAX_NODES = 10_000
