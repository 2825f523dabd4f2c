"""Unit tests for InMemoryInviteRepository."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from inviteflow.domain.value import UserId
from inviteflow.persistence.repository.inmemory import InMemoryInviteRepository
from tests.factories import make_invite


@pytest.fixture
def repo():
    return InMemoryInviteRepository()


class TestInMemoryInviteRepository:
    @pytest.mark.asyncio
    async def test_create_and_find(self, repo):
        invite = await repo.create(make_invite(email="a@example.com", phone="+1"))

        assert await repo.find_by_id(invite.id) == invite
        assert await repo.find_by_email("a@example.com") == invite
        assert await repo.find_by_phone("+1") == invite
        assert await repo.find_by_email("b@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, repo):
        invite = await repo.create(make_invite())

        with pytest.raises(ValueError, match="Duplicate"):
            await repo.create(invite)

    @pytest.mark.asyncio
    async def test_second_main_rejected(self, repo):
        inviter_id = UserId(uuid4())
        await repo.create(make_invite(inviter_id, main=True))

        with pytest.raises(ValueError, match="Main invite"):
            await repo.create(make_invite(inviter_id, main=True))

    @pytest.mark.asyncio
    async def test_get_or_create_main_returns_existing(self, repo):
        inviter_id = UserId(uuid4())

        first = await repo.get_or_create_main(make_invite(inviter_id))
        second = await repo.get_or_create_main(make_invite(inviter_id))

        assert first.main is True
        assert second == first
        assert await repo.find_main_by_inviter(inviter_id) == first

    @pytest.mark.asyncio
    async def test_accept_if_pending_only_once(self, repo):
        invite = await repo.create(make_invite())
        now = datetime(2026, 3, 15, 12, 0)

        accepted = await repo.accept_if_pending(invite.id, UserId(uuid4()), now)
        again = await repo.accept_if_pending(invite.id, UserId(uuid4()), now)

        assert accepted.accepted is True
        assert again is None
        assert await repo.find_by_id(invite.id) == accepted

    @pytest.mark.asyncio
    async def test_accept_if_pending_unknown(self, repo):
        result = await repo.accept_if_pending(
            make_invite().id, UserId(uuid4()), datetime(2026, 1, 1)
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_add_click(self, repo):
        invite = await repo.create(make_invite())
        clicked_at = datetime(2026, 3, 15, 12, 0)

        assert await repo.add_click(invite.id, clicked_at) is True
        assert await repo.add_click(make_invite().id, clicked_at) is False

        saved = await repo.find_by_id(invite.id)
        assert saved.clicks == (clicked_at,)
        assert saved.click_count == 1

    @pytest.mark.asyncio
    async def test_counts_since(self, repo):
        start = datetime(2026, 3, 8)
        await repo.create(
            make_invite(
                created_at=start + timedelta(days=1),
                clicks=(start - timedelta(days=1), start + timedelta(days=2)),
                click_count=2,
            )
        )
        old = await repo.create(make_invite(created_at=start - timedelta(days=5)))
        await repo.accept_if_pending(old.id, UserId(uuid4()), start + timedelta(hours=1))

        assert await repo.count_created_since(start) == 1
        assert await repo.count_clicks_since(start) == 1
        assert await repo.count_accepted_since(start) == 1

    @pytest.mark.asyncio
    async def test_find_by_inviter_newest_first(self, repo):
        inviter_id = UserId(uuid4())
        base = datetime(2026, 3, 1)
        for day in range(3):
            await repo.create(
                make_invite(inviter_id, created_at=base + timedelta(days=day))
            )
        await repo.create(make_invite())

        page = await repo.find_by_inviter(inviter_id, limit=2)
        rest = await repo.find_by_inviter(inviter_id, limit=2, offset=2)

        assert [i.created_at.day for i in page] == [3, 2]
        assert [i.created_at.day for i in rest] == [1]
