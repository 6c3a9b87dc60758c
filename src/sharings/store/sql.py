"""SQLDocumentStore — DocumentStore backed by a SQLModel session."""

from __future__ import annotations

import logging
import os
import uuid
from typing import TYPE_CHECKING, Any

from sqlmodel import SQLModel, create_engine

from sharings.exceptions import DocumentConflictError, DocumentNotFoundError
from sharings.models.documents import StoredDocument

if TYPE_CHECKING:
    from sqlalchemy import Engine
    from sqlmodel import Session

    from .protocol import Document

logger = logging.getLogger(__name__)

DATABASE_URL_ENV = "SHARINGS_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite://"


def create_store_engine(url: str | None = None, *, echo: bool = False) -> Engine:
    """Create an engine and the ``documents`` table.

    Falls back to ``$SHARINGS_DATABASE_URL``, then to in-memory SQLite.
    """
    resolved = url or os.environ.get(DATABASE_URL_ENV, DEFAULT_DATABASE_URL)
    engine = create_engine(resolved, echo=echo)
    SQLModel.metadata.create_all(engine, tables=[StoredDocument.__table__])  # type: ignore[attr-defined]
    return engine


def new_revision(generation: int = 1) -> str:
    """Return a revision token of the form ``<generation>-<hex>``."""
    return f"{generation}-{uuid.uuid4().hex}"


class SQLDocumentStore:
    """Stores documents as JSON rows in the ``documents`` table.

    Receives the session at construction.  Writes are flushed but not
    committed; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_document(self, doctype: str, doc_id: str) -> dict[str, Any]:
        row = self._session.get(StoredDocument, (doctype, doc_id))
        if row is None:
            raise DocumentNotFoundError(doctype, doc_id)
        return {**row.body, "_id": row.id, "_rev": row.rev}

    def create_document(self, doc: Document) -> None:
        doctype = doc.doc_type
        doc_id = doc.id or uuid.uuid4().hex
        if self._session.get(StoredDocument, (doctype, doc_id)) is not None:
            raise DocumentConflictError(doctype, doc_id)

        body = doc.to_document()
        body.pop("_id", None)
        body.pop("_rev", None)
        rev = new_revision()

        self._session.add(StoredDocument(doctype=doctype, id=doc_id, rev=rev, body=body))
        self._session.flush()

        doc.id = doc_id
        doc.rev = rev
        logger.debug("Created %s/%s at %s", doctype, doc_id, rev)
