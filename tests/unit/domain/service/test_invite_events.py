"""Unit tests for InviteEvents."""

import asyncio

import pytest

from inviteflow.domain.service import InviteEvents
from tests.factories import make_invite


class TestInviteEvents:
    """Tests for accept callback dispatch."""

    @pytest.mark.asyncio
    async def test_sync_and_async_callbacks_are_called(self):
        events = InviteEvents()
        invite = make_invite()
        calls = []

        def on_sync(received):
            calls.append(("sync", received.id))

        async def on_async(received):
            calls.append(("async", received.id))

        events.register_accept_callback(on_sync)
        events.register_accept_callback(on_async)

        events.emit_accepted(invite)
        await events.wait_pending()

        assert calls == [("sync", invite.id), ("async", invite.id)]

    @pytest.mark.asyncio
    async def test_emit_does_not_wait_for_async_callbacks(self):
        """A blocked async callback stays pending after emit returns."""
        # Arrange
        events = InviteEvents()
        gate = asyncio.Event()
        received = []

        async def slow(invite):
            await gate.wait()
            received.append(invite.id)

        events.register_accept_callback(slow)
        invite = make_invite()

        # Act
        events.emit_accepted(invite)

        # Assert
        assert events.pending == 1
        assert received == []

        gate.set()
        await events.wait_pending()
        assert received == [invite.id]
        assert events.pending == 0

    @pytest.mark.asyncio
    async def test_failing_callbacks_do_not_stop_others(self):
        events = InviteEvents()
        calls = []

        async def broken_async(_invite):
            raise RuntimeError("boom")

        def broken_sync(_invite):
            raise RuntimeError("boom")

        events.register_accept_callback(broken_async)
        events.register_accept_callback(broken_sync)
        events.register_accept_callback(calls.append)

        events.emit_accepted(make_invite())
        await events.wait_pending()

        assert len(calls) == 1
        assert events.pending == 0

    @pytest.mark.asyncio
    async def test_unregistered_callback_is_not_called(self):
        events = InviteEvents()
        calls = []
        events.register_accept_callback(calls.append)
        events.unregister_accept_callback(calls.append)

        events.emit_accepted(make_invite())

        assert calls == []
