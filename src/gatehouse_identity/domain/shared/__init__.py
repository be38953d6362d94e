"""Shared domain building blocks (time, execution context, repository errors)."""

from gatehouse_identity.domain.shared.exceptions import (
    ContextCancelledError,
    DeadlineExceededError,
    RecordNotFoundError,
    RepositoryError,
)
from gatehouse_identity.domain.shared.execution_context import ExecutionContext
from gatehouse_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ContextCancelledError",
    "DeadlineExceededError",
    "ExecutionContext",
    "RecordNotFoundError",
    "RepositoryError",
    "ensure_tz_aware",
    "utc_now",
]
