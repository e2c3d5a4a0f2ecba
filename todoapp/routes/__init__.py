# =============================================================================
# File: todoapp/routes/__init__.py
# Purpose: Register the API blueprints.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .api_todos import bp as todos_bp


def register_routes(app: Flask) -> Flask:
    """Register all API blueprints on the Flask app."""
    app.register_blueprint(todos_bp, url_prefix="/api")

    return app
