# =============================================================================
# File: todoapp/db.py
# Purpose: SQLAlchemy engine + session factory wrapped in an explicit store
#          handle, with typed errors instead of raw driver exceptions.
# =============================================================================
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, List, Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine, delete, not_, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.schema import CreateTable

# Load environment variables from .env file
load_dotenv()

log = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///todos.db"

# Postgres "undefined_table"
UNDEFINED_TABLE_SQLSTATE = "42P01"

# Width of the id column: SQLite INTEGER is 64-bit, Postgres SERIAL 32-bit
ID_BITS = {"sqlite": 64}
DEFAULT_ID_BITS = 32


def database_url_from_env() -> str:
    """DATABASE_URL, then POSTGRES_URL, then a local SQLite file."""
    return (
        os.getenv("DATABASE_URL")
        or os.getenv("POSTGRES_URL")
        or DEFAULT_DATABASE_URL
    )


class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass


class StoreError(Exception):
    """Any failure talking to the database."""


class RelationNotFound(StoreError):
    """The queried table does not exist."""


def _is_missing_relation(exc: SQLAlchemyError) -> bool:
    orig = getattr(exc, "orig", None)
    if orig is None:
        return False
    # psycopg exposes .sqlstate, psycopg2 .pgcode
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNDEFINED_TABLE_SQLSTATE:
        return True
    return "no such table" in str(orig)


def _classify(exc: SQLAlchemyError) -> StoreError:
    if _is_missing_relation(exc):
        return RelationNotFound(str(exc))
    return StoreError(str(exc))


class TodoStore:
    """Handle on the todos table.

    Built once per application by ``create_app`` and handed to the request
    handlers. Every public method runs a single statement and raises
    ``StoreError`` (or a subclass) on failure.
    """

    def __init__(self, url: str, **engine_kwargs) -> None:
        self.url = url
        self.engine = create_engine(url, echo=False, future=True, **engine_kwargs)
        self.Session = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )
        bits = ID_BITS.get(self.engine.dialect.name, DEFAULT_ID_BITS)
        self.id_range = range(-(2 ** (bits - 1)), 2 ** (bits - 1))

    def _storable_id(self, todo_id: int) -> bool:
        """False for ids the id column cannot hold; no row can match them."""
        return todo_id in self.id_range

    @contextmanager
    def _session(self) -> Iterator:
        try:
            with self.Session() as s:
                yield s
        except SQLAlchemyError as exc:
            raise _classify(exc) from exc

    # -----------------------------------------------------------------
    # Schema
    # -----------------------------------------------------------------
    def probe(self) -> None:
        """Raise ``RelationNotFound`` if the todos table is not queryable."""
        with self._session() as s:
            s.execute(text("SELECT 1 FROM todos LIMIT 1"))

    def create_table(self) -> None:
        from .models import Todo

        with self._session() as s:
            s.execute(CreateTable(Todo.__table__, if_not_exists=True))
            s.commit()

    # -----------------------------------------------------------------
    # CRUD
    # -----------------------------------------------------------------
    def list_todos(self) -> List["Todo"]:
        from .models import Todo

        with self._session() as s:
            return s.query(Todo).order_by(Todo.id.asc()).all()

    def add_todo(self, task: str) -> "Todo":
        from .models import Todo

        with self._session() as s:
            t = Todo(task=task, completed=False)
            s.add(t)
            s.commit()
            return t

    def delete_todo(self, todo_id: int) -> int:
        """Delete by id; returns the number of rows removed (0 or 1)."""
        from .models import Todo

        if not self._storable_id(todo_id):
            return 0
        with self._session() as s:
            result = s.execute(delete(Todo).where(Todo.id == todo_id))
            s.commit()
            return result.rowcount

    def toggle_todo(self, todo_id: int) -> Optional[dict]:
        """Flip ``completed`` in one UPDATE ... RETURNING statement.

        Returns the updated row as a dict, or None if no row has that id.
        """
        from .models import Todo

        if not self._storable_id(todo_id):
            return None

        stmt = (
            update(Todo)
            .where(Todo.id == todo_id)
            .values(completed=not_(Todo.completed))
            .returning(Todo.id, Todo.task, Todo.completed)
            .execution_options(synchronize_session=False)
        )
        with self._session() as s:
            row = s.execute(stmt).one_or_none()
            s.commit()
        if row is None:
            return None
        return {"id": row.id, "task": row.task, "completed": bool(row.completed)}

    def dispose(self) -> None:
        self.engine.dispose()
