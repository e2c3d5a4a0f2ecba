# =============================================================================
# File: tests/conftest.py
# Purpose: One fresh SQLite database per test.
# =============================================================================
import pytest

from todoapp import create_app


@pytest.fixture
def app(tmp_path):
    """App bound to a temporary SQLite file."""
    app = create_app({"DATABASE_URL": f"sqlite:///{tmp_path / 'test_todos.sqlite'}"})
    yield app
    app.extensions["todo_store"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["todo_store"]
