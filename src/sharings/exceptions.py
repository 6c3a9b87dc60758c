"""Custom exception hierarchy for sharings."""


class SharingsError(Exception):
    """Base exception for all sharings errors."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class SharingValidationError(SharingsError):
    """Raised when sharing parameters are rejected before any I/O."""


class BadSharingTypeError(SharingValidationError):
    """Raised when the sharing type is not one of the known topologies."""

    def __init__(self, sharing_type: str = "") -> None:
        super().__init__(f"Invalid sharing type: {sharing_type!r}")
        self.sharing_type = sharing_type


class MissingStateError(SharingValidationError):
    """Raised when an incoming sharing request carries no state token."""

    def __init__(self) -> None:
        super().__init__("Missing state parameter")


class MissingScopeError(SharingValidationError):
    """Raised when an incoming sharing request carries no scope."""

    def __init__(self) -> None:
        super().__init__("Missing scope parameter")


class BadScopeError(SharingsError):
    """Raised when a scope string cannot be parsed into a permission set."""


# ---------------------------------------------------------------------------
# Recipients
# ---------------------------------------------------------------------------


class RecipientDoesNotExistError(SharingsError):
    """Raised when a referenced recipient has no stored document."""

    def __init__(self, recipient_id: str) -> None:
        super().__init__(f"Recipient with given ID does not exist: {recipient_id!r}")
        self.recipient_id = recipient_id


class RecipientNotResolvedError(SharingsError):
    """Raised when a recipient is serialized before being resolved."""


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class StorageError(SharingsError):
    """Raised on document store failures."""


class DocumentNotFoundError(StorageError):
    """Raised when no document matches the given doctype and id."""

    def __init__(self, doctype: str, doc_id: str) -> None:
        super().__init__(f"Document not found: {doctype}/{doc_id}")
        self.doctype = doctype
        self.doc_id = doc_id


class DocumentConflictError(StorageError):
    """Raised when creating a document whose id is already taken."""

    def __init__(self, doctype: str, doc_id: str) -> None:
        super().__init__(f"Document already exists: {doctype}/{doc_id}")
        self.doctype = doctype
        self.doc_id = doc_id
