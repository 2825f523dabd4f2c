"""Mail adapter."""

from .smtp import MockSmtpMailer, RealSmtpMailer, SmtpMailer

__all__ = ["SmtpMailer", "RealSmtpMailer", "MockSmtpMailer"]
