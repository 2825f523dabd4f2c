"""Send invites use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from inviteflow.application.usecase.base import BaseUseCase
from inviteflow.domain.service import InviteService
from inviteflow.domain.value import Invitee, IssueOutcome, Member, UserId


class InviteeInfo(BaseModel):
    """Info for a single invitee."""

    email: str | None = None
    phone: str | None = None


class SendInvitesRequest(BaseModel):
    """Request to send invites."""

    inviter_id: str
    inviter_name: str | None = None
    inviter_email: str | None = None
    invitees: list[InviteeInfo] = Field(max_length=50)


class SentInviteItem(BaseModel):
    """Per-invitee result, in request order."""

    outcome: IssueOutcome
    email: str | None
    phone: str | None
    invite_id: str | None = None
    invite_url: str | None = None
    error: str | None = None


class SendInvitesResponse(BaseModel):
    """Response after sending invites."""

    results: list[SentInviteItem]
    created_count: int
    failed_count: int


class SendInvitesUseCase(BaseUseCase[SendInvitesRequest, SendInvitesResponse]):
    """Use case for inviting several people at once.

    Each invitee gets its own one-off invite; failures are reported in
    place rather than aborting the batch.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: SendInvitesRequest) -> SendInvitesResponse:
        """Create invites and report the outcome for each invitee.

        Args:
            request: Send invites request

        Returns:
            Results aligned with ``request.invitees``
        """
        inviter = Member(
            id=UserId(UUID(request.inviter_id)),
            name=request.inviter_name,
            email=request.inviter_email,
        )
        invitees = [
            Invitee(email=info.email, phone=info.phone) for info in request.invitees
        ]

        with logfire.span(
            "send_invites", inviter_id=str(inviter.id), invite_count=len(invitees)
        ):
            results = await self.invite_service.add_invites(inviter, invitees)

            items = []
            for invitee, result in zip(invitees, results):
                invite = result.invite
                items.append(
                    SentInviteItem(
                        outcome=result.outcome,
                        email=invitee.email,
                        phone=invitee.phone,
                        invite_id=str(invite.id) if invite else None,
                        invite_url=(
                            self.invite_service.build_invite_url(invite)
                            if invite
                            else None
                        ),
                        error=result.error,
                    )
                )

            failed = sum(1 for r in results if r.outcome == IssueOutcome.FAILED)
            return SendInvitesResponse(
                results=items,
                created_count=len(results) - failed,
                failed_count=failed,
            )
