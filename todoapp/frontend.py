# todoapp/frontend.py
"""
Frontend routes: the browser client page and its stylesheet.

Files are read from disk on every request; nothing is cached.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, Response, current_app

log = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"

frontend_bp = Blueprint("frontend", __name__)


def serve_file(path: Path, content_type: str) -> Response:
    """Return the file's bytes with the given content type, or a 404."""
    try:
        content = path.read_bytes()
    except OSError as exc:
        log.error("Error reading file %s: %s", path, exc)
        return Response("Not Found", status=404, content_type="text/plain; charset=utf-8")
    return Response(content, status=200, content_type=content_type)


def _public_dir() -> Path:
    return Path(current_app.config.get("PUBLIC_DIR") or PUBLIC_DIR)


@frontend_bp.get("/")
def index():
    return serve_file(_public_dir() / "index.html", "text/html; charset=utf-8")


@frontend_bp.get("/style.css")
def stylesheet():
    return serve_file(_public_dir() / "style.css", "text/css; charset=utf-8")
