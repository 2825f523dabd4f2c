"""Domain value objects for invitations."""

from inviteflow.domain.value.identifiers import InviteId, UserId
from inviteflow.domain.value.types import Invitee, IssueOutcome, MailMessage, Member

__all__ = [
    # Identifiers
    "UserId",
    "InviteId",
    # Types
    "Invitee",
    "IssueOutcome",
    "MailMessage",
    "Member",
]
