"""Outgoing mail interface."""


class Mailer:
    """Generic mail sender interface.

    Implementations raise ``MailDeliveryError`` when the message could not
    be handed off. Callers on the invite path treat delivery as best-effort.
    """

    async def send(self, to: str, subject: str, text: str, html: str) -> str:
        """Send an email.

        Args:
            to: Recipient address
            subject: Subject line
            text: Plain text body
            html: HTML body

        Returns:
            Message identifier assigned by the sender
        """
        raise NotImplementedError
