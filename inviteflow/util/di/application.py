"""Application layer DI providers."""

from dishka import Scope, provide

from inviteflow.application.usecase.invite import (
    AcceptInviteUseCase,
    CheckInviteUseCase,
    GetInviteStatsUseCase,
    IssueLinkUseCase,
    RecordClickUseCase,
    SendInvitesUseCase,
)
from inviteflow.domain.service import InviteService
from inviteflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_issue_link_use_case(
        self, invite_service: InviteService
    ) -> IssueLinkUseCase:
        """Provide issue link use case."""
        return IssueLinkUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_send_invites_use_case(
        self, invite_service: InviteService
    ) -> SendInvitesUseCase:
        """Provide send invites use case."""
        return SendInvitesUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self, invite_service: InviteService
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_check_invite_use_case(
        self, invite_service: InviteService
    ) -> CheckInviteUseCase:
        """Provide signup invite check use case."""
        return CheckInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_record_click_use_case(
        self, invite_service: InviteService
    ) -> RecordClickUseCase:
        """Provide record click use case."""
        return RecordClickUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_invite_stats_use_case(
        self, invite_service: InviteService
    ) -> GetInviteStatsUseCase:
        """Provide invite statistics use case."""
        return GetInviteStatsUseCase(invite_service=invite_service)
