"""Execution context passed through every repository call."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import AsyncIterator
from uuid import uuid4

from gatehouse_identity.domain.shared.exceptions import (
    ContextCancelledError,
    DeadlineExceededError,
)
from gatehouse_identity.domain.shared.time import ensure_tz_aware, utc_now


class ExecutionContext:
    """
    Request-scoped cancellation and deadline carrier.

    A context is created per incoming request and handed unchanged to every
    dependency call made on its behalf. Children derived with
    ``with_timeout``/``with_deadline`` see the parent's cancellation and can
    only shorten its deadline, never extend it.

    Cancellation is cooperative: repositories check it with
    ``raise_if_done()`` or bound their I/O with ``async with ctx.timeout()``.

    Examples
    --------
    >>> ctx = ExecutionContext.background().with_timeout(2.5)
    >>> ctx.cancelled
    False
    >>> ctx.cancel()
    >>> ctx.cancelled
    True
    """

    def __init__(
        self,
        deadline: datetime | None = None,
        request_id: str | None = None,
        parent: ExecutionContext | None = None,
    ):
        if deadline is not None:
            deadline = ensure_tz_aware(deadline)
        if parent is not None and parent.deadline is not None:
            if deadline is None or parent.deadline < deadline:
                deadline = parent.deadline

        self._deadline = deadline
        self._parent = parent
        self._cancelled = False
        if request_id is None:
            request_id = parent.request_id if parent is not None else uuid4().hex
        self._request_id = request_id

    @classmethod
    def background(cls) -> ExecutionContext:
        """Return a fresh context with no deadline that is never cancelled
        unless ``cancel()`` is called on it."""
        return cls()

    def with_deadline(self, deadline: datetime) -> ExecutionContext:
        return ExecutionContext(deadline=deadline, parent=self)

    def with_timeout(self, seconds: float) -> ExecutionContext:
        return self.with_deadline(utc_now() + timedelta(seconds=seconds))

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def deadline(self) -> datetime | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        return self._parent is not None and self._parent.cancelled

    @property
    def expired(self) -> bool:
        return self._deadline is not None and utc_now() >= self._deadline

    def cancel(self) -> None:
        self._cancelled = True

    def remaining(self) -> float | None:
        """Seconds left until the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(0.0, (self._deadline - utc_now()).total_seconds())

    def raise_if_done(self) -> None:
        """Raise if the context is cancelled or past its deadline.

        Raises
        ------
        ContextCancelledError
            If this context or one of its parents was cancelled
        DeadlineExceededError
            If the deadline has passed
        """
        if self.cancelled:
            raise ContextCancelledError
        if self.expired:
            raise DeadlineExceededError

    @asynccontextmanager
    async def timeout(self) -> AsyncIterator[None]:
        """Bound the enclosed awaits by the remaining deadline."""
        self.raise_if_done()
        try:
            async with asyncio.timeout(self.remaining()):
                yield
        except TimeoutError as e:
            raise DeadlineExceededError from e

    def __repr__(self) -> str:
        return (
            f"ExecutionContext(request_id={self._request_id!r}, "
            f"deadline={self._deadline!r}, cancelled={self.cancelled})"
        )
