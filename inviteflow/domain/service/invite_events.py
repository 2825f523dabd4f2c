"""Observer registry for invite lifecycle events."""

import asyncio
import inspect
from typing import Awaitable, Callable

import logfire

from inviteflow.domain.model.invite import Invite

AcceptCallback = Callable[[Invite], Awaitable[None] | None]


def _callback_name(callback: AcceptCallback) -> str:
    return getattr(callback, "__name__", repr(callback))


class InviteEvents:
    """Holds callbacks notified after an invite is accepted.

    Lives for the whole application so that callbacks registered at
    startup reach every request-scoped service. Async callbacks run as
    background tasks; the accept that triggered them never waits on them.
    """

    def __init__(self) -> None:
        self._accept_callbacks: list[AcceptCallback] = []
        self._pending: set[asyncio.Task] = set()

    def register_accept_callback(self, callback: AcceptCallback) -> None:
        """Register a function (sync or async) called with each accepted invite."""
        self._accept_callbacks.append(callback)

    def unregister_accept_callback(self, callback: AcceptCallback) -> None:
        self._accept_callbacks.remove(callback)

    @property
    def pending(self) -> int:
        """Number of async callbacks still running."""
        return len(self._pending)

    def emit_accepted(self, invite: Invite) -> None:
        """Notify accept callbacks without waiting for them.

        Plain callbacks run immediately; awaitables they return are
        scheduled on the running loop. Failures are logged and never reach
        the caller.
        """
        for callback in list(self._accept_callbacks):
            try:
                result = callback(invite)
            except Exception as e:
                self._log_failure(invite, callback, e)
                continue

            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                self._pending.add(task)
                task.add_done_callback(
                    lambda t, cb=callback: self._on_done(t, invite, cb)
                )

    async def wait_pending(self) -> None:
        """Wait for scheduled callbacks to finish, e.g. at shutdown."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _on_done(
        self, task: asyncio.Task, invite: Invite, callback: AcceptCallback
    ) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logfire.warn(
                "Accept callback cancelled",
                invite_id=str(invite.id),
                callback=_callback_name(callback),
            )
            return
        error = task.exception()
        if error is not None:
            self._log_failure(invite, callback, error)

    def _log_failure(
        self, invite: Invite, callback: AcceptCallback, error: BaseException
    ) -> None:
        logfire.error(
            "Accept callback failed",
            invite_id=str(invite.id),
            callback=_callback_name(callback),
            error=str(error),
            error_type=type(error).__name__,
        )
