"""SQL emitted by PostgresInviteRepository, checked without a database."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects.postgresql.asyncpg import dialect as asyncpg_dialect

from inviteflow.persistence.repository import PostgresInviteRepository
from tests.factories import make_invite


@pytest.fixture
def session():
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock())
    return session


def compiled_sql(session) -> str:
    stmt = session.execute.call_args.args[0]
    return str(stmt.compile(dialect=asyncpg_dialect()))


class TestTimestampBinding:
    """Naive clock values bind as timestamptz like created_at and accepted_at."""

    @pytest.mark.asyncio
    async def test_add_click_binds_timestamptz(self, session):
        repo = PostgresInviteRepository(session)

        await repo.add_click(make_invite().id, datetime(2026, 3, 15, 12, 0))

        sql = compiled_sql(session)
        assert "array_append" in sql
        assert "TIMESTAMP WITH TIME ZONE" in sql
        assert "WITHOUT TIME ZONE" not in sql

    @pytest.mark.asyncio
    async def test_click_window_binds_timestamptz(self, session):
        session.execute.return_value.scalar.return_value = 3
        repo = PostgresInviteRepository(session)

        count = await repo.count_clicks_since(datetime(2026, 3, 8, 12, 0))

        sql = compiled_sql(session)
        assert count == 3
        assert "unnest" in sql
        assert "TIMESTAMP WITH TIME ZONE" in sql
        assert "WITHOUT TIME ZONE" not in sql

    @pytest.mark.asyncio
    async def test_empty_click_window_is_zero(self, session):
        session.execute.return_value.scalar.return_value = None
        repo = PostgresInviteRepository(session)

        assert await repo.count_clicks_since(datetime(2026, 3, 8)) == 0
