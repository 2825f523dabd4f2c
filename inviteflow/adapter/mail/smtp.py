"""SMTP mail sender."""

import asyncio
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

import logfire

from inviteflow.adapter.error import MailDeliveryError
from inviteflow.domain.service.mailer import Mailer
from inviteflow.domain.value import MailMessage


class SmtpMailer(Mailer):
    """Base class for SMTP mailers.

    Provides type distinction for dependency injection.
    """

    pass


class RealSmtpMailer(SmtpMailer):
    """Sends multipart (text + HTML) mail through an SMTP relay.

    smtplib is blocking, so delivery runs in a worker thread.
    """

    def __init__(
        self,
        host: str,
        port: int,
        from_name: str,
        from_address: str,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        """Initialize SMTP mailer.

        Args:
            host: SMTP relay host
            port: SMTP relay port
            from_name: Display name in the From header
            from_address: Sender address
            username: Login user, if the relay requires auth
            password: Login password
            use_tls: Whether to upgrade the connection with STARTTLS
            timeout: Socket timeout in seconds
        """
        self.host = host
        self.port = port
        self.from_name = from_name
        self.from_address = from_address
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = formataddr((self.from_name, self.from_address))
        email["To"] = message.to
        email["Subject"] = message.subject
        email["Message-ID"] = make_msgid()
        email.set_content(message.text)
        email.add_alternative(message.html, subtype="html")
        return email

    def _deliver(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(email)

    async def send(self, to: str, subject: str, text: str, html: str) -> str:
        """Send an email through the relay.

        Raises:
            MailDeliveryError: If the relay rejects or cannot be reached
        """
        email = self._build(MailMessage(to=to, subject=subject, text=text, html=html))
        try:
            await asyncio.to_thread(self._deliver, email)
        except (smtplib.SMTPException, OSError) as e:
            logfire.error(
                "SMTP delivery failed",
                host=self.host,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise MailDeliveryError(f"Could not send mail: {e}") from e

        logfire.info("Mail sent", host=self.host, message_id=email["Message-ID"])
        return email["Message-ID"]


class MockSmtpMailer(SmtpMailer):
    """Mock mailer for testing.

    Records messages instead of sending them. Set ``fail_with`` to make
    every send raise.
    """

    def __init__(self, fail_with: Exception | None = None) -> None:
        """Initialize mock mailer without relay configuration."""
        self.sent: list[MailMessage] = []
        self.fail_with = fail_with

    async def send(self, to: str, subject: str, text: str, html: str) -> str:
        """Record the message and return a deterministic id."""
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(MailMessage(to=to, subject=subject, text=text, html=html))
        return f"<mock-{len(self.sent)}@localhost>"
