"""Issue invite link use case."""

from uuid import UUID

from pydantic import BaseModel

from inviteflow.application.usecase.base import BaseUseCase
from inviteflow.domain.service import InviteService
from inviteflow.domain.value import UserId


class IssueLinkRequest(BaseModel):
    """Request an invite link."""

    inviter_id: str
    unique: bool = True  # Reuse the inviter's main link


class IssueLinkResponse(BaseModel):
    """Issued invite link."""

    url: str


class IssueLinkUseCase(BaseUseCase[IssueLinkRequest, IssueLinkResponse]):
    """Use case for getting a shareable invite link."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: IssueLinkRequest) -> IssueLinkResponse:
        url = await self.invite_service.get_user_link(
            UserId(UUID(request.inviter_id)), unique=request.unique
        )
        return IssueLinkResponse(url=url)
