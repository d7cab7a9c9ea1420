"""
Test configuration settings to ensure all required fields are present.
"""
import os

import pytest


def test_settings_defaults():
    os.environ.setdefault('SECRET_KEY', 'test-secret-key')
    os.environ.setdefault('MONGO_URI', 'mongodb://localhost:27017/test')
    os.environ.setdefault('FLASK_ENV', 'testing')

    from flashdeck.infrastructure.config import settings

    assert settings.COLLECTIONS_TABLE == "flashcards"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.CORS_ORIGINS == "*"


def test_production_requires_debug_off(monkeypatch):
    monkeypatch.setenv('FLASK_ENV', 'production')
    monkeypatch.setenv('DEBUG', 'true')

    from importlib import reload
    import flashdeck.infrastructure.config as config_module

    with pytest.raises(ValueError, match="DEBUG"):
        reload(config_module)

    monkeypatch.setenv('FLASK_ENV', 'testing')
    monkeypatch.delenv('DEBUG')
    reload(config_module)
