"""Errors raised by outbound adapters."""


class AdapterError(Exception):
    """Base error for calls to external systems."""


class MailDeliveryError(AdapterError):
    """The mail relay refused the message or could not be reached."""
