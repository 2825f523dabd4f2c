"""Domain services."""

from .base import Service
from .invite_events import AcceptCallback, InviteEvents
from .invite_service import InviteService
from .mailer import Mailer

__all__ = [
    "AcceptCallback",
    "InviteEvents",
    "InviteService",
    "Mailer",
    "Service",
]
