"""Invite domain service."""

from datetime import datetime, timedelta
from typing import Callable, Sequence
from uuid import uuid4

import logfire

from inviteflow.config import InvitationSettings, MailSettings
from inviteflow.domain.error import InviteReissueError, NotFoundError
from inviteflow.domain.model.invite import Invite, IssueResult
from inviteflow.domain.repository import InviteRepository
from inviteflow.domain.value import InviteId, Invitee, IssueOutcome, Member, UserId
from inviteflow.util.error import ConfigurationError

from .base import Service
from .invite_events import AcceptCallback, InviteEvents
from .mailer import Mailer


class InviteService(Service):
    """Domain service for the invitation lifecycle.

    Issues main and one-off links, looks invites up by identity, resolves
    double acceptance and computes windowed statistics.
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        invitation_settings: InvitationSettings,
        mail_settings: MailSettings,
        mailer: Mailer | None = None,
        events: InviteEvents | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            invitation_settings: Link and statistics configuration
            mail_settings: Sender details used in invitation emails
            mailer: Mail sender, required when invitation emails are enabled
            events: Accept callback registry
            clock: Source of the current time

        Raises:
            ConfigurationError: If the invite base URL is missing, or email
                sending is enabled without a mailer
        """
        if not invitation_settings.base_url_and_route:
            raise ConfigurationError(
                "Invite base URL and route must be configured",
                setting="INVITATIONS__BASE_URL_AND_ROUTE",
            )
        if invitation_settings.send_email and mailer is None:
            raise ConfigurationError(
                "Invitation emails are enabled but no mailer is set",
                setting="INVITATIONS__SEND_EMAIL",
            )

        self.invite_repository = invite_repository
        self.invitation_settings = invitation_settings
        self.mail_settings = mail_settings
        self.mailer = mailer
        self.events = events or InviteEvents()
        self._now = clock

    def register_accept_callback(self, callback: AcceptCallback) -> None:
        """Register a hook invoked with every accepted invite."""
        self.events.register_accept_callback(callback)

    def build_invite_url(self, invite: Invite) -> str:
        """Build the shareable URL for an invite."""
        base = self.invitation_settings.base_url_and_route.rstrip("/")
        return f"{base}/{invite.id}"

    async def get_user_link(self, inviter_id: UserId, unique: bool = True) -> str:
        """Get an invite link for a user.

        With ``unique`` the inviter's main link is reused (created on first
        call). Otherwise a fresh one-off link is created every time.

        Args:
            inviter_id: User the link belongs to
            unique: Whether to return the inviter's reusable main link

        Returns:
            Fully-qualified invite URL
        """
        with logfire.span(
            "invite_service.get_user_link", inviter_id=str(inviter_id), unique=unique
        ):
            candidate = Invite(
                id=InviteId(uuid4()),
                inviter_id=inviter_id,
                main=unique,
                created_at=self._now(),
            )
            if unique:
                invite = await self.invite_repository.get_or_create_main(candidate)
            else:
                invite = await self.invite_repository.create(candidate)

            logfire.info(
                "Invite link issued",
                invite_id=str(invite.id),
                inviter_id=str(inviter_id),
                main=invite.main,
            )
            return self.build_invite_url(invite)

    async def add_invite(
        self, inviter: Member, email: str | None = None, phone: str | None = None
    ) -> IssueResult:
        """Create a one-off invite for a specific person.

        Never raises: a store failure yields a ``FAILED`` result and a mail
        failure yields ``CREATED_EMAIL_FAILED`` with the invite kept.

        Args:
            inviter: User sending the invite
            email: Invitee email
            phone: Invitee phone

        Returns:
            Issue result carrying the created invite, if any
        """
        with logfire.span(
            "invite_service.add_invite",
            inviter_id=str(inviter.id),
            has_email=bool(email),
            has_phone=bool(phone),
        ):
            try:
                invite = await self.invite_repository.create(
                    Invite(
                        id=InviteId(uuid4()),
                        inviter_id=inviter.id,
                        email=email,
                        phone=phone,
                        main=False,
                        created_at=self._now(),
                    )
                )
            except Exception as e:
                logfire.error(
                    "Failed to create invite",
                    inviter_id=str(inviter.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return IssueResult(outcome=IssueOutcome.FAILED, error=str(e))

            logfire.info(
                "Invite created", invite_id=str(invite.id), inviter_id=str(inviter.id)
            )

            mailer = self.mailer if self.invitation_settings.send_email else None
            if mailer is not None and email:
                try:
                    await self._send_invitation_email(mailer, inviter, invite, email)
                except Exception as e:
                    logfire.warn(
                        "Invitation email failed, invite kept",
                        invite_id=str(invite.id),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    return IssueResult(
                        outcome=IssueOutcome.CREATED_EMAIL_FAILED,
                        invite=invite,
                        error=str(e),
                    )

            return IssueResult(outcome=IssueOutcome.CREATED, invite=invite)

    async def add_invites(
        self, inviter: Member, invitees: Sequence[Invitee]
    ) -> list[IssueResult]:
        """Create one-off invites in order.

        The result list lines up with ``invitees``; failures stay in place.
        """
        with logfire.span(
            "invite_service.add_invites",
            inviter_id=str(inviter.id),
            invite_count=len(invitees),
        ):
            results = []
            for invitee in invitees:
                results.append(
                    await self.add_invite(inviter, invitee.email, invitee.phone)
                )
            return results

    async def find_invite_by_email_phone(
        self, email: str | None = None, phone: str | None = None
    ) -> Invite | None:
        """Find an invite by identity.

        Email is tried first, then phone. The first hit wins; the two are
        never combined.

        Args:
            email: Invitee email
            phone: Invitee phone

        Returns:
            Matching invite, or None
        """
        with logfire.span(
            "invite_service.find_invite_by_email_phone",
            has_email=bool(email),
            has_phone=bool(phone),
        ):
            if email:
                invite = await self.invite_repository.find_by_email(email)
                if invite:
                    return invite

            if phone:
                invite = await self.invite_repository.find_by_phone(phone)
                if invite:
                    return invite

            return None

    async def accept(self, invite_id: InviteId, new_user_id: UserId) -> Invite:
        """Accept an invite on behalf of a new user.

        If the invite was already redeemed (before the call or by a
        concurrent caller), the original is left untouched and a new invite
        for the same inviter is created and accepted instead.

        Args:
            invite_id: ID of the invite to accept
            new_user_id: ID of the newly created user

        Returns:
            The accepted invite (original or newly created)

        Raises:
            NotFoundError: If the invite does not exist
        """
        with logfire.span(
            "invite_service.accept",
            invite_id=str(invite_id),
            new_user_id=str(new_user_id),
        ):
            invite = await self.invite_repository.find_by_id(invite_id)
            if not invite:
                logfire.error("Invite not found for acceptance", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))

            accepted_at = self._now()
            accepted = None
            if not invite.accepted:
                accepted = await self.invite_repository.accept_if_pending(
                    invite.id, new_user_id, accepted_at
                )
                if accepted is None:
                    logfire.warn(
                        "Invite accepted concurrently", invite_id=str(invite_id)
                    )

            if accepted is None:
                accepted = await self._accept_sibling(invite, new_user_id, accepted_at)

            logfire.info(
                "Invite accepted",
                invite_id=str(accepted.id),
                requested_invite_id=str(invite_id),
                new_user_id=str(new_user_id),
            )

            self.events.emit_accepted(accepted)
            return accepted

    async def check_invite(self, member: Member) -> Invite | None:
        """Accept the invite addressed to a newly signed-up user, if any.

        Not every user arrives through an invite; no match is a no-op.
        """
        with logfire.span("invite_service.check_invite", user_id=str(member.id)):
            if not member.email:
                return None
            invite = await self.find_invite_by_email_phone(member.email)
            if not invite:
                return None
            return await self.accept(invite.id, member.id)

    async def add_click(self, invite_id: InviteId) -> None:
        """Record a visit to an invite link.

        Raises:
            NotFoundError: If the invite does not exist
        """
        with logfire.span("invite_service.add_click", invite_id=str(invite_id)):
            updated = await self.invite_repository.add_click(invite_id, self._now())
            if not updated:
                logfire.warn("Click on unknown invite", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))

    async def list_invites(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites created by a user, newest first."""
        with logfire.span(
            "invite_service.list_invites",
            inviter_id=str(inviter_id),
            limit=limit,
            offset=offset,
        ):
            return await self.invite_repository.find_by_inviter(
                inviter_id, limit, offset
            )

    # Statistics

    def get_start_date(self, days: int | None = None) -> datetime:
        """Start of a statistics window ending now.

        Subtracts calendar days from the local wall-clock time; a missing
        or zero ``days`` uses the configured default.
        """
        days = days or self.invitation_settings.default_window_days
        return self._now() - timedelta(days=days)

    async def amount_clicked_since_days(self, days: int | None = None) -> int:
        """Number of click events inside the window."""
        start_date = self.get_start_date(days)
        with logfire.span(
            "invite_service.amount_clicked_since_days", start_date=start_date
        ):
            return await self.invite_repository.count_clicks_since(start_date)

    async def amount_sent_since_days(self, days: int | None = None) -> int:
        """Number of invites created inside the window."""
        start_date = self.get_start_date(days)
        with logfire.span(
            "invite_service.amount_sent_since_days", start_date=start_date
        ):
            return await self.invite_repository.count_created_since(start_date)

    async def amount_accepted_since_days(self, days: int | None = None) -> int:
        """Number of invites accepted inside the window."""
        start_date = self.get_start_date(days)
        with logfire.span(
            "invite_service.amount_accepted_since_days", start_date=start_date
        ):
            return await self.invite_repository.count_accepted_since(start_date)

    async def _accept_sibling(
        self, original: Invite, new_user_id: UserId, accepted_at: datetime
    ) -> Invite:
        sibling = await self.invite_repository.create(
            Invite(
                id=InviteId(uuid4()),
                inviter_id=original.inviter_id,
                main=False,
                created_at=accepted_at,
            )
        )
        logfire.info(
            "Invite already accepted, issued new invite",
            original_invite_id=str(original.id),
            invite_id=str(sibling.id),
            inviter_id=str(original.inviter_id),
        )
        accepted = await self.invite_repository.accept_if_pending(
            sibling.id, new_user_id, accepted_at
        )
        if accepted is None:
            raise InviteReissueError(str(original.id), str(sibling.id))
        return accepted

    async def _send_invitation_email(
        self, mailer: Mailer, inviter: Member, invite: Invite, to: str
    ) -> None:
        mail = self.mail_settings
        subject = f"[{mail.from_name}] You have received an invitation"
        inviter_label = inviter.name or ""
        if inviter.email:
            inviter_label = f"{inviter_label} ({inviter.email})".strip()
        text = (
            f"Your friend {inviter_label} invited you to use "
            f"{mail.app_name or mail.from_name}.\n\n"
            f"To accept the invitation, open the link: {self.build_invite_url(invite)}"
        )
        html = text.replace("\r\n", "<br/>").replace("\n", "<br/>")

        message_id = await mailer.send(to, subject, text, html)
        logfire.info(
            "Invitation email sent", invite_id=str(invite.id), message_id=message_id
        )
