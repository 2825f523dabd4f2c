"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from inviteflow.domain.model.invite import Invite
from inviteflow.domain.repository.invite import InviteRepository
from inviteflow.domain.value import InviteId, UserId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    Each method body runs without awaiting, so every update is atomic with
    respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    def _index_of(self, invite_id: InviteId) -> int | None:
        for i, invite in enumerate(self._invites):
            if invite.id == invite_id:
                return i
        return None

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        for invite in self._invites:
            if invite.id == invite_id:
                return invite
        return None

    async def find_main_by_inviter(self, inviter_id: UserId) -> Optional[Invite]:
        """Find the inviter's main invite."""
        for invite in self._invites:
            if invite.inviter_id == inviter_id and invite.main:
                return invite
        return None

    async def find_by_email(self, email: str) -> Optional[Invite]:
        """Find the first invite tagged with an email."""
        for invite in self._invites:
            if invite.email == email:
                return invite
        return None

    async def find_by_phone(self, phone: str) -> Optional[Invite]:
        """Find the first invite tagged with a phone number."""
        for invite in self._invites:
            if invite.phone == phone:
                return invite
        return None

    async def create(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            ValueError: If the ID is taken or a second main invite is added
        """
        if self._index_of(invite.id) is not None:
            raise ValueError(f"Duplicate invite id {invite.id}")
        if invite.main:
            for existing in self._invites:
                if existing.inviter_id == invite.inviter_id and existing.main:
                    raise ValueError(
                        f"Main invite already exists for inviter {invite.inviter_id}"
                    )
        self._invites.append(invite)
        return invite

    async def get_or_create_main(self, invite: Invite) -> Invite:
        """Return the inviter's main invite, inserting one if missing."""
        for existing in self._invites:
            if existing.inviter_id == invite.inviter_id and existing.main:
                return existing
        invite = invite.model_copy(update={"main": True})
        self._invites.append(invite)
        return invite

    async def accept_if_pending(
        self, invite_id: InviteId, accepted_by: UserId, accepted_at: datetime
    ) -> Optional[Invite]:
        """Accept an invite if it is still pending."""
        i = self._index_of(invite_id)
        if i is None or self._invites[i].accepted:
            return None
        updated = self._invites[i].model_copy(
            update={
                "accepted": True,
                "accepted_at": accepted_at,
                "accepted_by_user_id": accepted_by,
            }
        )
        self._invites[i] = updated
        return updated

    async def add_click(self, invite_id: InviteId, clicked_at: datetime) -> bool:
        """Append a click and bump the counter."""
        i = self._index_of(invite_id)
        if i is None:
            return False
        current = self._invites[i]
        self._invites[i] = current.model_copy(
            update={
                "clicks": current.clicks + (clicked_at,),
                "click_count": current.click_count + 1,
            }
        )
        return True

    async def count_created_since(self, start: datetime) -> int:
        """Count invites created since ``start``."""
        return sum(1 for invite in self._invites if invite.created_at >= start)

    async def count_accepted_since(self, start: datetime) -> int:
        """Count invites accepted since ``start``."""
        return sum(
            1
            for invite in self._invites
            if invite.accepted
            and invite.accepted_at is not None
            and invite.accepted_at >= start
        )

    async def count_clicks_since(self, start: datetime) -> int:
        """Count click events since ``start`` across all invites."""
        return sum(
            len([clicked_at for clicked_at in invite.clicks if clicked_at >= start])
            for invite in self._invites
        )

    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites by inviter with pagination."""
        matches = [invite for invite in self._invites if invite.inviter_id == inviter_id]

        # Sort by created_at descending
        matches.sort(key=lambda inv: inv.created_at, reverse=True)

        return matches[offset : offset + limit]
