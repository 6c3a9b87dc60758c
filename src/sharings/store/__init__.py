"""Document store interfaces and the SQL implementation."""

from sharings.store.protocol import Document, DocumentStore
from sharings.store.sql import SQLDocumentStore, create_store_engine, new_revision

__all__ = [
    "Document",
    "DocumentStore",
    "SQLDocumentStore",
    "create_store_engine",
    "new_revision",
]
