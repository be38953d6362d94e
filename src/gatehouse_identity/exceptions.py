"""Identity error taxonomy.

Every failure ``UserService`` reports is one of the classes below. Each
carries a human-readable message and a stable ``ErrorCode`` that transport
adapters map to their own status codes. Errors produced from a dependency
failure keep the original exception on ``cause`` (and as ``__cause__``).
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes for adapters. Should not be changed."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    USERNAME_EXISTS = "USERNAME_EXISTS"
    ROLE_CREATE_FAILED = "ROLE_CREATE_FAILED"
    USER_CREATE_FAILED = "USER_CREATE_FAILED"
    USER_UPDATE_FAILED = "USER_UPDATE_FAILED"
    USER_DELETE_FAILED = "USER_DELETE_FAILED"
    USER_LIST_FAILED = "USER_LIST_FAILED"
    ROLE_LIST_FAILED = "ROLE_LIST_FAILED"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    PASSWORD_HASH_FAILED = "PASSWORD_HASH_FAILED"
    SAME_PASSWORD = "SAME_PASSWORD"
    TOKEN_GENERATION_FAILED = "TOKEN_GENERATION_FAILED"


class IdentityError(Exception):
    """Base exception for all identity errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    cause
        The dependency failure this error wraps, if any
    """

    default_message = "identity error"
    code: ErrorCode

    def __init__(self, cause: BaseException | None = None):
        self.cause = cause
        if cause is None:
            self.message = self.default_message
        else:
            self.message = f"{self.default_message}: {cause}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r})"
        )


class InvalidCredentialsError(IdentityError):
    """Raised when a password does not match the stored hash."""

    default_message = "invalid credentials"
    code = ErrorCode.INVALID_CREDENTIALS


class UserNotFoundError(IdentityError):
    """Raised when a user lookup fails."""

    default_message = "user not found"
    code = ErrorCode.USER_NOT_FOUND


class EmailAlreadyTakenError(IdentityError):
    """Raised when registering with an email that is already in use."""

    default_message = "email already taken"
    code = ErrorCode.EMAIL_TAKEN


class UsernameAlreadyExistsError(IdentityError):
    """Raised by storage adapters on a duplicate username."""

    default_message = "username already exists"
    code = ErrorCode.USERNAME_EXISTS


class RoleCreationFailedError(IdentityError):
    default_message = "failed to create role"
    code = ErrorCode.ROLE_CREATE_FAILED


class UserCreationFailedError(IdentityError):
    default_message = "failed to create user"
    code = ErrorCode.USER_CREATE_FAILED


class UserUpdateFailedError(IdentityError):
    default_message = "failed to update user"
    code = ErrorCode.USER_UPDATE_FAILED


class UserDeletionFailedError(IdentityError):
    default_message = "failed to delete user"
    code = ErrorCode.USER_DELETE_FAILED


class UserListFailedError(IdentityError):
    default_message = "failed to list users"
    code = ErrorCode.USER_LIST_FAILED


class RoleListFailedError(UserListFailedError):
    """Raised when listing roles fails.

    Subclasses ``UserListFailedError`` so handlers written against the
    list-users failure keep catching it.
    """

    default_message = "failed to list roles"
    code = ErrorCode.ROLE_LIST_FAILED


class RoleNotFoundError(IdentityError):
    """Raised when a role lookup fails."""

    default_message = "role not found"
    code = ErrorCode.ROLE_NOT_FOUND


class PasswordHashingFailedError(IdentityError):
    default_message = "failed to hash password"
    code = ErrorCode.PASSWORD_HASH_FAILED


class SamePasswordError(IdentityError):
    """Raised when the new password equals the old one."""

    default_message = "cannot use the same password"
    code = ErrorCode.SAME_PASSWORD


class TokenGenerationFailedError(IdentityError):
    default_message = "failed to generate token"
    code = ErrorCode.TOKEN_GENERATION_FAILED
