"""Accept invite use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inviteflow.application.usecase.base import BaseUseCase
from inviteflow.domain.error import DomainError
from inviteflow.domain.model import Invite
from inviteflow.domain.service import InviteService
from inviteflow.domain.value import InviteId, Member, UserId


class AcceptedInvite(BaseModel):
    """Accepted invite in responses."""

    invite_id: str
    inviter_id: str
    accepted_by_user_id: str
    accepted_at: datetime
    reissued: bool  # True when a new invite was created because the link was used

    @classmethod
    def from_invite(cls, invite: Invite, requested_id: InviteId) -> "AcceptedInvite":
        """Build the response for an accepted invite.

        Raises:
            DomainError: If the invite has not been accepted
        """
        if invite.accepted_at is None or invite.accepted_by_user_id is None:
            raise DomainError(f"Invite {invite.id} has not been accepted")
        return cls(
            invite_id=str(invite.id),
            inviter_id=str(invite.inviter_id),
            accepted_by_user_id=str(invite.accepted_by_user_id),
            accepted_at=invite.accepted_at,
            reissued=invite.id != requested_id,
        )


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    invite_id: str
    new_user_id: str


class AcceptInviteUseCase(BaseUseCase[AcceptInviteRequest, AcceptedInvite]):
    """Use case for redeeming an invite link.

    Raises ``NotFoundError`` for unknown invites.
    """

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptedInvite:
        invite_id = InviteId(UUID(request.invite_id))
        invite = await self.invite_service.accept(
            invite_id, UserId(UUID(request.new_user_id))
        )
        return AcceptedInvite.from_invite(invite, invite_id)


class CheckInviteRequest(BaseModel):
    """Signup-time invite check request."""

    user_id: str
    email: str | None = None
    name: str | None = None


class CheckInviteResponse(BaseModel):
    """Signup-time invite check response."""

    matched: bool
    invite_id: str | None = None
    inviter_id: str | None = None


class CheckInviteUseCase(BaseUseCase[CheckInviteRequest, CheckInviteResponse]):
    """Use case run when a user signs up.

    Accepts the invite sent to the user's email, if there is one.
    """

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: CheckInviteRequest) -> CheckInviteResponse:
        member = Member(
            id=UserId(UUID(request.user_id)), name=request.name, email=request.email
        )
        invite = await self.invite_service.check_invite(member)
        if invite is None:
            return CheckInviteResponse(matched=False)
        return CheckInviteResponse(
            matched=True, invite_id=str(invite.id), inviter_id=str(invite.inviter_id)
        )
