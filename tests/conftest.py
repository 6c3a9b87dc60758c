"""Shared fixtures for sharings tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlmodel import Session, SQLModel, create_engine

import sharings.models  # noqa: F401  registers the documents table
from sharings.recipients import Recipient, create_recipient
from sharings.store import SQLDocumentStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Engine


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite engine with all tables created."""
    eng = create_engine("sqlite://", echo=False)
    SQLModel.metadata.create_all(eng)
    return eng


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """SQLModel session bound to the in-memory engine, rolled back after each test."""
    with Session(engine) as s:
        s.begin()
        yield s
        s.rollback()


@pytest.fixture
def store(session: Session) -> SQLDocumentStore:
    return SQLDocumentStore(session)


@pytest.fixture
def alice(store: SQLDocumentStore) -> Recipient:
    return create_recipient(
        store, Recipient(email="alice@example.net", url="https://alice.example.net")
    )


@pytest.fixture
def bob(store: SQLDocumentStore) -> Recipient:
    return create_recipient(store, Recipient(email="bob@example.net", url="https://bob.example.net"))
