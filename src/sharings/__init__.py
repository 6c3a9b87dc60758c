"""Sharings: permission sets shared between a personal cloud and its recipients.

Validation and creation of sharing records, recipient resolution, and
JSON:API rendering of a sharing with its recipients.
"""

__version__ = "0.1.0"

from sharings.consts import (
    RECIPIENTS_DOCTYPE,
    SHARINGS_DOCTYPE,
    SharingStatus,
    SharingType,
)
from sharings.exceptions import (
    BadScopeError,
    BadSharingTypeError,
    DocumentConflictError,
    DocumentNotFoundError,
    MissingScopeError,
    MissingStateError,
    RecipientDoesNotExistError,
    RecipientNotResolvedError,
    SharingsError,
    SharingValidationError,
    StorageError,
)
from sharings.jsonapi import (
    LinksList,
    Relationship,
    Resource,
    ResourceIdentifier,
    render,
)
from sharings.permissions import PermissionSet, Rule, parse_scope
from sharings.recipients import Recipient, create_recipient, get_recipient
from sharings.sharing import (
    Sharing,
    SharingRecipient,
    check_sharing_creation,
    check_sharing_type,
    create,
    create_sharing_request,
    get_sharing,
)
from sharings.store import Document, DocumentStore, SQLDocumentStore, create_store_engine

__all__ = [
    "RECIPIENTS_DOCTYPE",
    "SHARINGS_DOCTYPE",
    "BadScopeError",
    "BadSharingTypeError",
    "Document",
    "DocumentConflictError",
    "DocumentNotFoundError",
    "DocumentStore",
    "LinksList",
    "MissingScopeError",
    "MissingStateError",
    "PermissionSet",
    "Recipient",
    "RecipientDoesNotExistError",
    "RecipientNotResolvedError",
    "Relationship",
    "Resource",
    "ResourceIdentifier",
    "Rule",
    "SQLDocumentStore",
    "Sharing",
    "SharingRecipient",
    "SharingStatus",
    "SharingType",
    "SharingValidationError",
    "SharingsError",
    "StorageError",
    "__version__",
    "check_sharing_creation",
    "check_sharing_type",
    "create",
    "create_recipient",
    "create_sharing_request",
    "create_store_engine",
    "get_recipient",
    "get_sharing",
    "parse_scope",
    "render",
]
