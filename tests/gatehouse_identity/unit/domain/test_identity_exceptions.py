"""Tests for the identity error taxonomy."""

import pytest

from gatehouse_identity import (
    EmailAlreadyTakenError,
    ErrorCode,
    IdentityError,
    InvalidCredentialsError,
    PasswordHashingFailedError,
    RecordNotFoundError,
    RoleCreationFailedError,
    RoleListFailedError,
    RoleNotFoundError,
    SamePasswordError,
    TokenGenerationFailedError,
    UserCreationFailedError,
    UserDeletionFailedError,
    UserListFailedError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserUpdateFailedError,
)


@pytest.mark.parametrize(
    ("error_class", "message", "code"),
    [
        (InvalidCredentialsError, "invalid credentials", ErrorCode.INVALID_CREDENTIALS),
        (UserNotFoundError, "user not found", ErrorCode.USER_NOT_FOUND),
        (EmailAlreadyTakenError, "email already taken", ErrorCode.EMAIL_TAKEN),
        (
            UsernameAlreadyExistsError,
            "username already exists",
            ErrorCode.USERNAME_EXISTS,
        ),
        (RoleCreationFailedError, "failed to create role", ErrorCode.ROLE_CREATE_FAILED),
        (UserCreationFailedError, "failed to create user", ErrorCode.USER_CREATE_FAILED),
        (UserUpdateFailedError, "failed to update user", ErrorCode.USER_UPDATE_FAILED),
        (UserDeletionFailedError, "failed to delete user", ErrorCode.USER_DELETE_FAILED),
        (UserListFailedError, "failed to list users", ErrorCode.USER_LIST_FAILED),
        (RoleListFailedError, "failed to list roles", ErrorCode.ROLE_LIST_FAILED),
        (RoleNotFoundError, "role not found", ErrorCode.ROLE_NOT_FOUND),
        (
            PasswordHashingFailedError,
            "failed to hash password",
            ErrorCode.PASSWORD_HASH_FAILED,
        ),
        (SamePasswordError, "cannot use the same password", ErrorCode.SAME_PASSWORD),
        (
            TokenGenerationFailedError,
            "failed to generate token",
            ErrorCode.TOKEN_GENERATION_FAILED,
        ),
    ],
)
def test_error_kinds(error_class, message, code):
    error = error_class()

    assert isinstance(error, IdentityError)
    assert str(error) == message
    assert error.message == message
    assert error.code == code
    assert error.cause is None


def test_wrapped_cause_is_appended_to_message():
    cause = RecordNotFoundError("User", "42")

    error = UserUpdateFailedError(cause)

    assert error.cause is cause
    assert str(error) == "failed to update user: User not found: 42"


def test_repr_shows_code():
    assert repr(SamePasswordError()) == (
        "SamePasswordError(message='cannot use the same password', "
        "code='SAME_PASSWORD')"
    )


def test_role_list_failure_is_caught_as_user_list_failure():
    with pytest.raises(UserListFailedError):
        raise RoleListFailedError(RuntimeError("db down"))


def test_error_codes_are_distinct():
    assert len({code.value for code in ErrorCode}) == len(ErrorCode)
