"""Doctypes, sharing types and recipient statuses."""

from __future__ import annotations

from enum import Enum

SHARINGS_DOCTYPE = "io.cozy.sharings"
RECIPIENTS_DOCTYPE = "io.cozy.recipients"


class SharingType(str, Enum):
    """Sync topology of a sharing."""

    ONE_SHOT = "one-shot"
    MASTER_SLAVE = "master-slave"
    MASTER_MASTER = "master-master"


class SharingStatus(str, Enum):
    """Lifecycle marker of a recipient within a sharing.

    Only ``PENDING`` is assigned here; the others are written by the
    invitation flow.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"
