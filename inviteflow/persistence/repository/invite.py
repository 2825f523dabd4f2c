"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, column, func, insert, literal, select, true, update
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from inviteflow.domain.model import Invite
from inviteflow.domain.repository import InviteRepository
from inviteflow.domain.value import InviteId, UserId
from inviteflow.persistence.mappers import invite_to_dict, row_to_invite
from inviteflow.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_main_by_inviter(self, inviter_id: UserId) -> Optional[Invite]:
        """Find the inviter's main invite."""
        stmt = select(invites_table).where(
            and_(
                invites_table.c.inviter_id == inviter_id,
                invites_table.c.main.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Invite]:
        """Find the oldest invite tagged with an email."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.email == email)
            .order_by(invites_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_phone(self, phone: str) -> Optional[Invite]:
        """Find the oldest invite tagged with a phone number."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.phone == phone)
            .order_by(invites_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def create(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Runs in a savepoint so a failed insert leaves the surrounding
        transaction usable for the next invite in a batch.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(invites_table).values(**invite_to_dict(invite))
            )
        return invite

    async def get_or_create_main(self, invite: Invite) -> Invite:
        """Return the inviter's main invite, inserting one if missing.

        Relies on the partial unique index on ``inviter_id WHERE main``.
        """
        stmt = (
            pg_insert(invites_table)
            .values(**invite_to_dict(invite.model_copy(update={"main": True})))
            .on_conflict_do_nothing(
                index_elements=[invites_table.c.inviter_id],
                index_where=invites_table.c.main,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

        existing = await self.find_main_by_inviter(invite.inviter_id)
        if existing is None:
            raise RuntimeError(
                f"Main invite for inviter {invite.inviter_id} missing after insert"
            )
        return existing

    async def accept_if_pending(
        self, invite_id: InviteId, accepted_by: UserId, accepted_at: datetime
    ) -> Optional[Invite]:
        """Accept an invite with a single conditional update."""
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.accepted.is_(False),
                )
            )
            .values(
                accepted=True,
                accepted_at=accepted_at,
                accepted_by_user_id=accepted_by,
            )
            .returning(invites_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def add_click(self, invite_id: InviteId, clicked_at: datetime) -> bool:
        """Append a click and bump the counter in one statement.

        The click is bound as ``timestamptz`` like the other timestamps, so
        naive clock values are converted the same way for every column.
        """
        stmt = (
            update(invites_table)
            .where(invites_table.c.id == invite_id)
            .values(
                clicks=func.array_append(
                    invites_table.c.clicks,
                    literal(clicked_at, TIMESTAMP(timezone=True)),
                ),
                click_count=invites_table.c.click_count + 1,
            )
            .returning(invites_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def count_created_since(self, start: datetime) -> int:
        """Count invites created since ``start``."""
        stmt = (
            select(func.count())
            .select_from(invites_table)
            .where(invites_table.c.created_at >= start)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_accepted_since(self, start: datetime) -> int:
        """Count invites accepted since ``start``."""
        stmt = (
            select(func.count())
            .select_from(invites_table)
            .where(
                and_(
                    invites_table.c.accepted.is_(True),
                    invites_table.c.accepted_at >= start,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_clicks_since(self, start: datetime) -> int:
        """Count click events since ``start`` across all invites.

        Each click log is unnested per row, filtered to the window and
        counted; no matching clicks yields 0.
        """
        click_log = (
            func.unnest(invites_table.c.clicks)
            .table_valued(column("clicked_at", TIMESTAMP(timezone=True)))
            .render_derived(name="click_log")
        )
        stmt = (
            select(func.count())
            .select_from(invites_table.join(click_log, true()))
            .where(click_log.c.clicked_at >= start)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites by inviter with pagination."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.inviter_id == inviter_id)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]
