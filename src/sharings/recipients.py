"""Recipient entity and lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .consts import RECIPIENTS_DOCTYPE
from .exceptions import DocumentNotFoundError, RecipientDoesNotExistError
from .jsonapi import LinksList

if TYPE_CHECKING:
    from .jsonapi import RelationshipMap, Resource
    from .store.protocol import DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class Recipient:
    """An identity a sharing can be granted to."""

    id: str = ""
    rev: str = ""
    email: str = ""
    url: str = ""

    @property
    def doc_type(self) -> str:
        return RECIPIENTS_DOCTYPE

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.id:
            doc["_id"] = self.id
        if self.rev:
            doc["_rev"] = self.rev
        if self.email:
            doc["email"] = self.email
        if self.url:
            doc["url"] = self.url
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Recipient:
        return cls(
            id=doc.get("_id", ""),
            rev=doc.get("_rev", ""),
            email=doc.get("email", ""),
            url=doc.get("url", ""),
        )

    def attributes(self) -> dict[str, Any]:
        doc = self.to_document()
        doc.pop("_id", None)
        doc.pop("_rev", None)
        return doc

    def links(self) -> LinksList:
        return LinksList(self_link=f"/recipients/{self.id}")

    def relationships(self) -> RelationshipMap:
        return {}

    def included(self) -> list[Resource]:
        return []


def get_recipient(store: DocumentStore, recipient_id: str) -> Recipient:
    """Return the stored recipient with *recipient_id*.

    Raises :class:`RecipientDoesNotExistError` if there is none.  Other
    store errors propagate unchanged.
    """
    try:
        doc = store.get_document(RECIPIENTS_DOCTYPE, recipient_id)
    except DocumentNotFoundError as exc:
        raise RecipientDoesNotExistError(recipient_id) from exc
    return Recipient.from_document(doc)


def create_recipient(store: DocumentStore, recipient: Recipient) -> Recipient:
    """Insert *recipient*; its id and rev are set by the store."""
    store.create_document(recipient)
    logger.debug("Created recipient %s", recipient.id)
    return recipient
