"""Record click use case."""

from uuid import UUID

from pydantic import BaseModel

from inviteflow.application.usecase.base import BaseUseCase
from inviteflow.domain.service import InviteService
from inviteflow.domain.value import InviteId


class RecordClickRequest(BaseModel):
    """Invite link visit."""

    invite_id: str


class RecordClickUseCase(BaseUseCase[RecordClickRequest, None]):
    """Use case for recording an invite link visit."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: RecordClickRequest) -> None:
        await self.invite_service.add_click(InviteId(UUID(request.invite_id)))
