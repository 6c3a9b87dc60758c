"""Sharing entity — validation, creation and recipient resolution.

A sharing is born in one of two ways:

* from an incoming request sent by another party
  (:func:`create_sharing_request`), in which case ``owner`` is false and
  ``sharing_id`` is the requester's state token;
* locally by its owner (:func:`check_sharing_creation` then
  :func:`create`), in which case ``owner`` is true, ``sharing_id`` is
  freshly generated and every recipient starts out pending.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .consts import RECIPIENTS_DOCTYPE, SHARINGS_DOCTYPE, SharingStatus, SharingType
from .exceptions import (
    BadSharingTypeError,
    MissingScopeError,
    MissingStateError,
    RecipientNotResolvedError,
)
from .jsonapi import LinksList, Relationship, ResourceIdentifier
from .permissions import PermissionSet, parse_scope
from .recipients import get_recipient
from .utils import random_string

if TYPE_CHECKING:
    from .jsonapi import RelationshipMap, Resource
    from .recipients import Recipient
    from .store.protocol import DocumentStore

logger = logging.getLogger(__name__)

SHARING_ID_LENGTH = 32


@dataclass
class SharingRecipient:
    """A recipient's membership in a sharing.

    ``recipient`` is filled in by :meth:`Sharing.resolve_recipients` and is
    never written to the store.
    """

    ref_recipient: ResourceIdentifier = field(
        default_factory=lambda: ResourceIdentifier(id="", type=RECIPIENTS_DOCTYPE)
    )
    status: str = ""
    access_token: str = ""
    refresh_token: str = ""
    recipient: Recipient | None = field(default=None, repr=False, compare=False)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.status:
            doc["status"] = self.status
        if self.access_token:
            doc["access_token"] = self.access_token
        if self.refresh_token:
            doc["refresh_token"] = self.refresh_token
        doc["recipient"] = self.ref_recipient.to_dict()
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> SharingRecipient:
        return cls(
            ref_recipient=ResourceIdentifier.from_dict(doc.get("recipient", {})),
            status=doc.get("status", ""),
            access_token=doc.get("access_token", ""),
            refresh_token=doc.get("refresh_token", ""),
        )

    def resolved(self) -> Recipient:
        if self.recipient is None:
            raise RecipientNotResolvedError(
                f"Recipient {self.ref_recipient.id!r} has not been resolved"
            )
        return self.recipient


@dataclass
class Sharing:
    """A sharing of a permission set with one or more recipients."""

    id: str = ""
    rev: str = ""
    type: str = ""
    owner: bool = False
    desc: str = ""
    sharing_id: str = ""
    sharing_type: str = ""
    permissions: PermissionSet | None = None
    recipients: list[SharingRecipient] = field(default_factory=list)

    @property
    def doc_type(self) -> str:
        return SHARINGS_DOCTYPE

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.id:
            doc["_id"] = self.id
        if self.rev:
            doc["_rev"] = self.rev
        if self.type:
            doc["type"] = self.type
        doc["owner"] = self.owner
        if self.desc:
            doc["desc"] = self.desc
        if self.sharing_id:
            doc["sharing_id"] = self.sharing_id
        doc["sharing_type"] = self.sharing_type
        if self.permissions is not None:
            doc["permissions"] = self.permissions.to_document()
        if self.recipients:
            doc["recipients"] = [r.to_document() for r in self.recipients]
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Sharing:
        permissions = doc.get("permissions")
        return cls(
            id=doc.get("_id", ""),
            rev=doc.get("_rev", ""),
            type=doc.get("type", ""),
            owner=doc.get("owner", False),
            desc=doc.get("desc", ""),
            sharing_id=doc.get("sharing_id", ""),
            sharing_type=doc.get("sharing_type", ""),
            permissions=PermissionSet.from_document(permissions) if permissions else None,
            recipients=[SharingRecipient.from_document(r) for r in doc.get("recipients", [])],
        )

    # ------------------------------------------------------------------
    # Recipients
    # ------------------------------------------------------------------

    def resolve_recipients(self, store: DocumentStore) -> list[SharingRecipient]:
        """Fetch every recipient, in order, and attach it to its membership.

        Stops at the first failure.  The ``recipients`` list is replaced
        only once all of them resolve, so a failed call leaves the
        sharing untouched.
        """
        resolved: list[SharingRecipient] = []
        for sharing_recipient in self.recipients:
            recipient = get_recipient(store, sharing_recipient.ref_recipient.id)
            resolved.append(replace(sharing_recipient, recipient=recipient))

        self.recipients = resolved
        logger.debug("Resolved %d recipient(s) for sharing %s", len(resolved), self.id)
        return resolved

    # ------------------------------------------------------------------
    # JSON:API
    # ------------------------------------------------------------------

    def attributes(self) -> dict[str, Any]:
        doc = self.to_document()
        doc.pop("_id", None)
        doc.pop("_rev", None)
        return doc

    def links(self) -> LinksList:
        return LinksList(self_link=f"/sharings/{self.id}")

    def relationships(self) -> RelationshipMap:
        """Return the ``recipients`` relationship, in membership order.

        Recipients must have been resolved first.
        """
        data = []
        for sharing_recipient in self.recipients:
            recipient = sharing_recipient.resolved()
            data.append(ResourceIdentifier(id=recipient.id, type=recipient.doc_type))
        return {"recipients": Relationship(data=data)}

    def included(self) -> list[Resource]:
        return [sharing_recipient.resolved() for sharing_recipient in self.recipients]


def check_sharing_type(sharing_type: str) -> SharingType:
    """Return the :class:`SharingType` for *sharing_type*.

    Raises :class:`BadSharingTypeError` if it is not a known type.
    """
    try:
        return SharingType(sharing_type)
    except ValueError:
        raise BadSharingTypeError(str(sharing_type)) from None


def create_sharing_request(
    store: DocumentStore,
    desc: str,
    state: str,
    sharing_type: str,
    scope: str,
) -> Sharing:
    """Check an incoming sharing request and persist it.

    The requester's *state* becomes the ``sharing_id``.  Validation
    happens before the store is touched; scope parsing and store errors
    propagate unchanged.
    """
    if not state:
        raise MissingStateError
    checked_type = check_sharing_type(sharing_type)
    if not scope:
        raise MissingScopeError
    permissions = parse_scope(scope)

    sharing = Sharing(
        sharing_type=checked_type.value,
        sharing_id=state,
        permissions=permissions,
        owner=False,
        desc=desc,
    )
    create(store, sharing)
    return sharing


def check_sharing_creation(store: DocumentStore, sharing: Sharing) -> None:
    """Prepare a locally created *sharing* before it is persisted.

    Resolves its recipients and marks them pending, flags the sharing as
    owned and gives it a new random ``sharing_id``.  Nothing is changed
    if a recipient cannot be resolved.  Does not persist.
    """
    check_sharing_type(sharing.sharing_type)

    sharing_recipients = sharing.resolve_recipients(store)
    for sharing_recipient in sharing_recipients:
        sharing_recipient.status = SharingStatus.PENDING.value

    sharing.owner = True
    sharing.sharing_id = random_string(SHARING_ID_LENGTH)
    logger.debug("Prepared sharing with %d pending recipient(s)", len(sharing_recipients))


def create(store: DocumentStore, sharing: Sharing) -> None:
    """Insert *sharing* in the store."""
    store.create_document(sharing)
    logger.debug("Created sharing %s (%s)", sharing.id, sharing.sharing_type)


def get_sharing(store: DocumentStore, sharing_id: str) -> Sharing:
    """Load the sharing stored under *sharing_id* (the document id)."""
    return Sharing.from_document(store.get_document(SHARINGS_DOCTYPE, sharing_id))
