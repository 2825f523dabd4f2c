"""Domain model entities."""

from inviteflow.domain.model.invite import Invite, IssueResult

__all__ = [
    "Invite",
    "IssueResult",
]
