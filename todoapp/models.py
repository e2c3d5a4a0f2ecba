# =============================================================================
# File: todoapp/models.py
# Purpose: ORM model for the single todos table.
# Notes:
# - SQLAlchemy 2.0 style (Mapped[...] + mapped_column)
# - On SQLite, AUTOINCREMENT keeps ids monotonic after deletes
# =============================================================================
from __future__ import annotations

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class Todo(Base):
    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false()
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "task": self.task,
            "completed": bool(self.completed),
        }
