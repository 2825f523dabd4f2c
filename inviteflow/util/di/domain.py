"""Domain layer DI providers."""

from dishka import Scope, provide

from inviteflow.config import InvitationSettings, MailSettings
from inviteflow.domain.repository import InviteRepository
from inviteflow.domain.service import InviteEvents, InviteService, Mailer
from inviteflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        invitation_settings: InvitationSettings,
        mail_settings: MailSettings,
        mailer: Mailer,
        events: InviteEvents,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            invitation_settings=invitation_settings,
            mail_settings=mail_settings,
            mailer=mailer,
            events=events,
        )
