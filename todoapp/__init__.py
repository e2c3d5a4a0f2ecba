# todoapp/__init__.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import InternalServerError, MethodNotAllowed, NotFound

from .db import TodoStore, database_url_from_env
from .frontend import frontend_bp
from .routes import register_routes
from .schema import init_schema_or_exit

log = logging.getLogger(__name__)

IMPLICIT_METHODS = ("OPTIONS", "HEAD")


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    # No implicit /static route: only / and /style.css serve files
    app = Flask(__name__, static_folder=None)

    app.config["DATABASE_URL"] = database_url_from_env()
    app.config["PUBLIC_DIR"] = None
    if config:
        app.config.update(config)

    store = TodoStore(app.config["DATABASE_URL"])
    init_schema_or_exit(store)
    app.extensions["todo_store"] = store

    register_routes(app)
    app.register_blueprint(frontend_bp)

    @app.before_request
    def log_request():
        log.info("%s %s", request.method, request.path)

    # Flask answers OPTIONS (and HEAD for GET rules) on its own; only the
    # methods a route declares are served
    @app.before_request
    def reject_implicit_methods():
        if request.method in IMPLICIT_METHODS:
            raise NotFound()

    # Unknown paths and unsupported methods are both plain 404s
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def not_found(e):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(InternalServerError)
    def server_error(e):
        log.error("Server error: %s", getattr(e, "original_exception", e))
        return jsonify({"error": "internal_error"}), 500

    return app
