"""StoredDocument model — one row per document, keyed by doctype and id."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class StoredDocument(SQLModel, table=True):
    """A schemaless JSON document.

    ``body`` holds every field except ``_id`` and ``_rev``, which live in
    their own columns.
    """

    __tablename__ = "documents"

    doctype: str = Field(primary_key=True)
    id: str = Field(primary_key=True)
    rev: str
    body: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=DateTime(timezone=True),  # type: ignore[invalid-argument-type]
    )
