"""Get invite statistics use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from inviteflow.application.usecase.base import BaseUseCase
from inviteflow.domain.service import InviteService


class GetInviteStatsRequest(BaseModel):
    """Statistics request; no days means the configured default window."""

    days: int | None = Field(default=None, ge=0)


class GetInviteStatsResponse(BaseModel):
    """Invite counts for one window."""

    start_date: datetime
    sent: int
    clicked: int
    accepted: int


class GetInviteStatsUseCase(
    BaseUseCase[GetInviteStatsRequest, GetInviteStatsResponse]
):
    """Use case for admin invite statistics."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: GetInviteStatsRequest) -> GetInviteStatsResponse:
        with logfire.span("get_invite_stats", days=request.days):
            return GetInviteStatsResponse(
                start_date=self.invite_service.get_start_date(request.days),
                sent=await self.invite_service.amount_sent_since_days(request.days),
                clicked=await self.invite_service.amount_clicked_since_days(
                    request.days
                ),
                accepted=await self.invite_service.amount_accepted_since_days(
                    request.days
                ),
            )
