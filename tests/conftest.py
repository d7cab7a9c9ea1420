import pytest
import os
from unittest.mock import MagicMock


# Required settings must exist before the app modules are imported
os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('MONGO_URI', 'mongodb://localhost:27017/test')
os.environ.setdefault('FLASK_ENV', 'testing')


@pytest.fixture(scope='module')
def app():
    """Create and configure a new app instance for each test module."""
    from app import create_app
    app = create_app()
    app.config.update({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
    })
    yield app


@pytest.fixture(scope='module')
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def mock_db():
    """Provides a mocked MongoDB database."""
    return MagicMock()
