"""Unit tests for SMTP mailers."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from inviteflow.adapter.error import MailDeliveryError
from inviteflow.adapter.mail import MockSmtpMailer, RealSmtpMailer


@pytest.fixture
def mailer():
    return RealSmtpMailer(
        host="smtp.example.com",
        port=587,
        from_name="Acme",
        from_address="no-reply@example.com",
        username="user",
        password="secret",
    )


class TestRealSmtpMailer:
    @pytest.mark.asyncio
    async def test_send_delivers_multipart_message(self, mailer):
        with patch("inviteflow.adapter.mail.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value.__enter__.return_value

            message_id = await mailer.send(
                "bob@example.com", "Hello", "line one\nline two", "line one<br/>line two"
            )

        smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("user", "secret")
        sent = server.send_message.call_args.args[0]
        assert sent["To"] == "bob@example.com"
        assert sent["Subject"] == "Hello"
        assert sent["From"] == "Acme <no-reply@example.com>"
        assert sent["Message-ID"] == message_id
        assert sent.get_body(("html",)).get_content().strip() == (
            "line one<br/>line two"
        )

    @pytest.mark.asyncio
    async def test_send_without_auth_or_tls(self):
        mailer = RealSmtpMailer(
            host="localhost",
            port=25,
            from_name="Acme",
            from_address="no-reply@example.com",
            use_tls=False,
        )
        with patch("inviteflow.adapter.mail.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value.__enter__.return_value

            await mailer.send("bob@example.com", "Hi", "text", "html")

        server.starttls.assert_not_called()
        server.login.assert_not_called()
        server.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_smtp_error_raises_delivery_error(self, mailer):
        with patch("inviteflow.adapter.mail.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value.__enter__.return_value
            server.send_message.side_effect = smtplib.SMTPRecipientsRefused({})

            with pytest.raises(MailDeliveryError):
                await mailer.send("bob@example.com", "Hi", "text", "html")

    @pytest.mark.asyncio
    async def test_connection_error_raises_delivery_error(self, mailer):
        with patch(
            "inviteflow.adapter.mail.smtp.smtplib.SMTP",
            MagicMock(side_effect=ConnectionRefusedError("refused")),
        ):
            with pytest.raises(MailDeliveryError, match="refused"):
                await mailer.send("bob@example.com", "Hi", "text", "html")


class TestMockSmtpMailer:
    @pytest.mark.asyncio
    async def test_records_messages(self):
        mailer = MockSmtpMailer()

        first = await mailer.send("a@example.com", "s", "t", "h")
        second = await mailer.send("b@example.com", "s", "t", "h")

        assert first != second
        assert [m.to for m in mailer.sent] == ["a@example.com", "b@example.com"]

    @pytest.mark.asyncio
    async def test_fail_with(self):
        mailer = MockSmtpMailer(fail_with=MailDeliveryError("down"))

        with pytest.raises(MailDeliveryError):
            await mailer.send("a@example.com", "s", "t", "h")
        assert mailer.sent == []
