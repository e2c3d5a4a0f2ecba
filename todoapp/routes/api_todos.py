# todoapp/routes/api_todos.py
from __future__ import annotations

import logging
import re
from typing import Optional

from flask import Blueprint, current_app, jsonify, request

from todoapp.db import StoreError, TodoStore

log = logging.getLogger(__name__)

bp = Blueprint("todos", __name__)

_ID_RE = re.compile(r"[+-]?[0-9]+")


def get_store() -> TodoStore:
    """The store handle built by create_app for this application."""
    return current_app.extensions["todo_store"]


def _parse_todo_id(raw: str) -> Optional[int]:
    # ASCII base-10 only; int() alone would also accept "1_0" and " 1 "
    if not _ID_RE.fullmatch(raw):
        return None
    return int(raw)


def _internal_error():
    return jsonify({"error": "internal_error"}), 500


# -----------------------------------------------------------------
# List / create
# -----------------------------------------------------------------
@bp.get("/todos")
def list_todos():
    """All todos, oldest first."""
    try:
        todos = get_store().list_todos()
    except StoreError:
        log.exception("Error fetching todos")
        return _internal_error()
    return jsonify([t.to_dict() for t in todos])


@bp.post("/todos")
def create_todo():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "invalid_json"}), 400

    task = data.get("task")
    if not isinstance(task, str) or not task.strip():
        return jsonify({"error": "invalid_task"}), 400

    try:
        todo = get_store().add_todo(task.strip())
    except StoreError:
        log.exception("Error adding todo")
        return _internal_error()
    return jsonify(todo.to_dict()), 201


# -----------------------------------------------------------------
# Delete / toggle by id
# -----------------------------------------------------------------
@bp.delete("/todos/<todo_id>")
def delete_todo(todo_id: str):
    """Idempotent: 204 whether or not the row existed."""
    tid = _parse_todo_id(todo_id)
    if tid is None:
        return jsonify({"error": "invalid_id"}), 400

    try:
        get_store().delete_todo(tid)
    except StoreError:
        log.exception("Error deleting todo with id %s", tid)
        return _internal_error()
    return "", 204


@bp.patch("/todos/<todo_id>/toggle")
def toggle_todo(todo_id: str):
    tid = _parse_todo_id(todo_id)
    if tid is None:
        return jsonify({"error": "invalid_id"}), 400

    try:
        todo = get_store().toggle_todo(tid)
    except StoreError:
        log.exception("Error toggling todo with id %s", tid)
        return _internal_error()
    if todo is None:
        return jsonify({"error": "not_found"}), 404
    return jsonify(todo)
