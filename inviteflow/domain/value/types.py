"""Domain value objects for invitations.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from inviteflow.domain.value.common import ValueObject
from inviteflow.domain.value.identifiers import UserId


class IssueOutcome(str, Enum):
    """Outcome of issuing a one-off invite."""

    CREATED = "created"
    CREATED_EMAIL_FAILED = "created_email_failed"
    FAILED = "failed"


class Member(ValueObject):
    """Reference to a platform user.

    Used both for the inviter (the email names them) and for a freshly
    signed-up user checked against pending invites.
    """

    id: UserId
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class Invitee(ValueObject):
    """Identity of a person being invited."""

    email: str | None = None
    phone: str | None = None

    @field_validator("email", "phone")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat blank identities as absent."""
        if v is not None and not v.strip():
            return None
        return v


class MailMessage(ValueObject):
    """Transactional email handed to a mailer."""

    to: str
    subject: str
    text: str
    html: str
