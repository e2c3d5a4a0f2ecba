# File: todoapp/schema.py
# Purpose: Make sure the todos table exists before the app serves requests.

from __future__ import annotations

import logging
import sys

from .db import RelationNotFound, StoreError, TodoStore

log = logging.getLogger(__name__)


def ensure_todos_table(store: TodoStore) -> bool:
    """Probe the todos table and create it when it is missing.

    Returns True if a creation statement was issued. Errors other than a
    missing table propagate as ``StoreError``.
    """
    try:
        store.probe()
        return False
    except RelationNotFound:
        log.info("todos table not found, creating it")

    store.create_table()
    log.info("todos table created")
    return True


def init_schema_or_exit(store: TodoStore) -> None:
    """Startup variant: any schema failure terminates the process."""
    try:
        ensure_todos_table(store)
    except StoreError:
        log.exception("Error checking/creating 'todos' table")
        sys.exit(1)
