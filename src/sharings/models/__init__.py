"""SQLModel database models for sharings."""

from sharings.models.documents import StoredDocument

__all__ = ["StoredDocument"]
