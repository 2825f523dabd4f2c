"""Invite entity.

An invite is a redeemable link owned by an inviter. Each inviter has at
most one reusable "main" link and any number of one-off links tagged with
the invitee's email or phone.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from inviteflow.domain.model.common import DomainModel
from inviteflow.domain.value import InviteId, IssueOutcome, UserId


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - Exactly one main invite per inviter
    - Acceptance is one-way; a redeemed invite is never reopened
    - Every click appends a timestamp and bumps the counter together
    - Invites are never deleted
    """

    id: InviteId
    inviter_id: UserId
    email: Optional[str] = None
    phone: Optional[str] = None
    main: bool = False  # The inviter's reusable link
    accepted: bool = False
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None
    clicks: tuple[datetime, ...] = ()  # Append-only visit log
    click_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_invariants(self) -> "Invite":
        """Keep the click counter and acceptance fields consistent."""
        if self.click_count != len(self.clicks):
            raise ValueError(
                f"click_count ({self.click_count}) must equal number of clicks "
                f"({len(self.clicks)})"
            )
        has_acceptance = (
            self.accepted_at is not None or self.accepted_by_user_id is not None
        )
        if self.accepted and (
            self.accepted_at is None or self.accepted_by_user_id is None
        ):
            raise ValueError("Accepted invite requires accepted_at and accepter")
        if not self.accepted and has_acceptance:
            raise ValueError("Pending invite cannot carry acceptance details")
        return self


class IssueResult(DomainModel):
    """Result of issuing a one-off invite.

    The invite record is the source of truth: it is present for both
    ``CREATED`` and ``CREATED_EMAIL_FAILED``.
    """

    outcome: IssueOutcome
    invite: Optional[Invite] = None
    error: Optional[str] = None

    @property
    def created(self) -> bool:
        return self.invite is not None
