"""Shared utilities for SQLAlchemy repositories."""

from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from gatehouse_identity.exceptions import (
    EmailAlreadyTakenError,
    UsernameAlreadyExistsError,
)


def new_id() -> str:
    """Generate an opaque identifier for a new record."""
    return str(uuid4())


def translate_user_integrity_error(error: IntegrityError) -> Exception:
    """
    Map a unique violation on the users table to the identity error kind.

    Only the driver message is inspected (the rendered SQL names every
    column). Returns the original error when the violated constraint cannot be
    attributed to email or username.
    """
    message = str(error.orig).lower()
    if "unique" not in message and "duplicate" not in message:
        return error
    if "username" in message:
        return UsernameAlreadyExistsError(error)
    if "email" in message:
        return EmailAlreadyTakenError(error)
    return error
