"""Mail infrastructure providers."""

from dishka import Scope, provide

from inviteflow.adapter.mail import RealSmtpMailer
from inviteflow.config import Settings
from inviteflow.domain.service import Mailer
from inviteflow.util.di.base import ProviderBase
from inviteflow.util.error import ConfigurationError


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mailer(self, settings: Settings) -> Mailer:
        """Provide SMTP mailer.

        Raises:
            ConfigurationError: If invitation emails are enabled without an SMTP
                host. Raised when the mailer is first resolved, not when the
                container is built
        """
        mail = settings.mail
        if settings.invitations.send_email and not mail.smtp_host:
            raise ConfigurationError(
                "SMTP host must be configured when invitation emails are enabled",
                setting="MAIL__SMTP_HOST",
            )

        return RealSmtpMailer(
            host=mail.smtp_host or "localhost",
            port=mail.smtp_port,
            from_name=mail.from_name,
            from_address=mail.from_address,
            username=mail.smtp_username,
            password=mail.smtp_password,
            use_tls=mail.use_tls,
            timeout=mail.timeout_seconds,
        )
