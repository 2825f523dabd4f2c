"""Core DI providers (non-mockable)."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from inviteflow.config import InvitationSettings, MailSettings, Settings
from inviteflow.domain.service import InviteEvents
from inviteflow.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        """Provide mail settings."""
        return settings.mail

    @provide(scope=Scope.APP)
    async def provide_invite_events(self) -> AsyncIterator[InviteEvents]:
        """Provide the application-wide accept callback registry.

        Callbacks still running when the container closes are awaited.
        """
        events = InviteEvents()
        yield events
        await events.wait_pending()
