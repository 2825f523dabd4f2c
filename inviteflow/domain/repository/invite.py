"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from inviteflow.domain.model.invite import Invite
from inviteflow.domain.value import InviteId, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_main_by_inviter(self, inviter_id: UserId) -> Invite | None:
        """Find the inviter's main (reusable) invite.

        Args:
            inviter_id: The inviter's ID

        Returns:
            The main invite if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Invite | None:
        """Find the first invite tagged with an email.

        Args:
            email: Invitee email

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_phone(self, phone: str) -> Invite | None:
        """Find the first invite tagged with a phone number.

        Args:
            phone: Invitee phone

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to create

        Returns:
            The stored invite
        """
        pass

    @abstractmethod
    async def get_or_create_main(self, invite: Invite) -> Invite:
        """Return the inviter's main invite, inserting ``invite`` if none exists.

        Must be safe under concurrent callers: at most one main invite
        per inviter is ever stored.

        Args:
            invite: Candidate main invite, used only when none exists

        Returns:
            The stored main invite
        """
        pass

    @abstractmethod
    async def accept_if_pending(
        self, invite_id: InviteId, accepted_by: UserId, accepted_at: datetime
    ) -> Invite | None:
        """Mark an invite accepted only if it is still pending.

        The check and the write happen as one store operation.

        Args:
            invite_id: Invite to accept
            accepted_by: User redeeming the invite
            accepted_at: Acceptance timestamp

        Returns:
            The updated invite, or None if missing or already accepted
        """
        pass

    @abstractmethod
    async def add_click(self, invite_id: InviteId, clicked_at: datetime) -> bool:
        """Append a click and increment the counter atomically.

        Args:
            invite_id: Invite that was visited
            clicked_at: Visit timestamp

        Returns:
            True if the invite exists and was updated
        """
        pass

    @abstractmethod
    async def count_created_since(self, start: datetime) -> int:
        """Count invites created at or after ``start``."""
        pass

    @abstractmethod
    async def count_accepted_since(self, start: datetime) -> int:
        """Count accepted invites whose acceptance is at or after ``start``."""
        pass

    @abstractmethod
    async def count_clicks_since(self, start: datetime) -> int:
        """Count individual click events at or after ``start``.

        Only the in-window part of each invite's click log is counted;
        returns 0 when nothing matches.
        """
        pass

    @abstractmethod
    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites by inviter with pagination, newest first.

        Args:
            inviter_id: The inviter's ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass
