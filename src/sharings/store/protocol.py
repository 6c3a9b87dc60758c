"""Document and DocumentStore protocols — runtime-checkable interfaces.

``Document`` is the persistable capability: anything with an id, a
revision and a doctype that can render itself to a JSON body.  A store
assigns ``id`` and ``rev`` back onto the document when it is created.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """A document that can be persisted in a :class:`DocumentStore`."""

    id: str
    rev: str

    @property
    def doc_type(self) -> str: ...

    def to_document(self) -> dict[str, Any]:
        """Return the JSON body, without ``_id`` and ``_rev``."""
        ...


@runtime_checkable
class DocumentStore(Protocol):
    """Minimal document store: fetch by id, create once."""

    def get_document(self, doctype: str, doc_id: str) -> dict[str, Any]:
        """Return the body of a document, including ``_id`` and ``_rev``.

        Raises ``DocumentNotFoundError`` when it does not exist.
        """
        ...

    def create_document(self, doc: Document) -> None:
        """Insert *doc* and set its ``id`` and ``rev``.

        Raises ``DocumentConflictError`` if the id is already taken.
        """
        ...
