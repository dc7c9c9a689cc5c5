import os

import pytest

# Set environment variables for testing before any imports
os.environ.update({
    # Test environment
    "ENVIRONMENT": "test",

    # Logging
    "LOG_LEVEL": "DEBUG",
})

from app import config  # noqa: E402


@pytest.fixture
def enabled_services(monkeypatch):
    """Habilita as três dependências externas com credenciais de teste."""
    monkeypatch.setattr(config, "SIGHTENGINE_API_USER", "test-sightengine-user")
    monkeypatch.setattr(config, "SIGHTENGINE_API_SECRET", "test-sightengine-secret")
    monkeypatch.setattr(config, "ROBOFLOW_API_KEY", "test-roboflow-key")
    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-gemini-key")
    yield


@pytest.fixture
def short_timeouts(monkeypatch):
    """Reduz os timeouts para que testes de lentidão terminem rápido."""
    for name in (
        "SIGHTENGINE_TIMEOUT",
        "ROBOFLOW_TIMEOUT",
        "GEMINI_TIMEOUT",
        "MEDIA_FETCH_TIMEOUT",
    ):
        monkeypatch.setattr(config, name, 0.05)
    yield
