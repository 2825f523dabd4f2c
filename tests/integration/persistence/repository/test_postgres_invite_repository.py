"""Integration tests for PostgresInviteRepository.

Assumes PostgreSQL is reachable at DATABASE__URL.
"""

import asyncio
import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from inviteflow.config import Settings
from inviteflow.domain.value import UserId
from inviteflow.persistence.database import create_engine, create_session_factory
from inviteflow.persistence.repository import PostgresInviteRepository
from inviteflow.persistence.tables import invites_table, metadata
from tests.factories import make_invite

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        "DATABASE__URL" not in os.environ, reason="DATABASE__URL is not set"
    ),
]

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def session_factory():
    engine = create_engine(Settings())
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(invites_table.delete())

    yield create_session_factory(engine)

    await engine.dispose()


@pytest_asyncio.fixture
async def repo(session_factory):
    async with session_factory() as session:
        yield PostgresInviteRepository(session)
        await session.commit()


class TestPostgresInviteRepository:
    @pytest.mark.asyncio
    async def test_create_and_find(self, repo):
        invite = await repo.create(
            make_invite(email="bob@example.com", phone="+15550100", created_at=NOW)
        )

        found = await repo.find_by_id(invite.id)

        assert found.id == invite.id
        assert found.email == "bob@example.com"
        assert (await repo.find_by_email("bob@example.com")).id == invite.id
        assert (await repo.find_by_phone("+15550100")).id == invite.id
        assert found.clicks == ()

    @pytest.mark.asyncio
    async def test_get_or_create_main_is_idempotent(self, repo):
        inviter_id = UserId(uuid4())

        first = await repo.get_or_create_main(make_invite(inviter_id, created_at=NOW))
        second = await repo.get_or_create_main(make_invite(inviter_id, created_at=NOW))

        assert first.main is True
        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_second_main_violates_unique_index(self, repo):
        inviter_id = UserId(uuid4())
        await repo.create(make_invite(inviter_id, main=True, created_at=NOW))

        with pytest.raises(IntegrityError):
            await repo.create(make_invite(inviter_id, main=True, created_at=NOW))

        # Savepoint rolled back; the session is still usable
        assert await repo.find_main_by_inviter(inviter_id) is not None

    @pytest.mark.asyncio
    async def test_accept_if_pending_only_once(self, repo):
        invite = await repo.create(make_invite(created_at=NOW))
        first_user = UserId(uuid4())

        accepted = await repo.accept_if_pending(invite.id, first_user, NOW)
        again = await repo.accept_if_pending(invite.id, UserId(uuid4()), NOW)

        assert accepted.accepted_by_user_id == first_user
        assert again is None

    @pytest.mark.asyncio
    async def test_concurrent_clicks(self, session_factory):
        async with session_factory() as session:
            invite = await PostgresInviteRepository(session).create(
                make_invite(created_at=NOW)
            )
            await session.commit()

        async def click():
            async with session_factory() as session:
                await PostgresInviteRepository(session).add_click(invite.id, NOW)
                await session.commit()

        await asyncio.gather(*(click() for _ in range(10)))

        async with session_factory() as session:
            saved = await PostgresInviteRepository(session).find_by_id(invite.id)

        assert saved.click_count == 10
        assert len(saved.clicks) == 10

    @pytest.mark.asyncio
    async def test_add_click_unknown(self, repo):
        assert await repo.add_click(make_invite().id, NOW) is False

    @pytest.mark.asyncio
    async def test_counts_since(self, repo):
        start = NOW - timedelta(days=7)
        invite = await repo.create(
            make_invite(
                created_at=NOW - timedelta(days=1),
                clicks=(NOW - timedelta(days=10), NOW - timedelta(days=2)),
                click_count=2,
            )
        )
        await repo.create(make_invite(created_at=NOW - timedelta(days=20)))
        await repo.accept_if_pending(invite.id, UserId(uuid4()), NOW)

        assert await repo.count_created_since(start) == 1
        assert await repo.count_clicks_since(start) == 1
        assert await repo.count_clicks_since(NOW - timedelta(days=14)) == 2
        assert await repo.count_accepted_since(start) == 1

    @pytest.mark.asyncio
    async def test_naive_clock_values_line_up(self, repo):
        """Clicks and creation stamped from the local clock agree once stored."""
        now = datetime.now()
        invite = await repo.create(make_invite(created_at=now))

        await repo.add_click(invite.id, now)

        saved = await repo.find_by_id(invite.id)
        assert saved.clicks == (saved.created_at,)
        assert await repo.count_clicks_since(now - timedelta(minutes=1)) == 1
        assert await repo.count_clicks_since(now + timedelta(minutes=1)) == 0

    @pytest.mark.asyncio
    async def test_counts_empty(self, repo):
        assert await repo.count_created_since(NOW) == 0
        assert await repo.count_clicks_since(NOW) == 0
        assert await repo.count_accepted_since(NOW) == 0
