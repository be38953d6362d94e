"""Gatehouse Identity - User and role management.

This package holds the business rules between transport and storage:
- Registration with lazy creation of the default role
- Login and token issuance
- User and role CRUD, role assignment, admin checks
- Password change and administrative reset

Persistence and credential algorithms are reached through the contracts in
``gatehouse_identity.domain``; ``gatehouse_auth`` and the SQLAlchemy adapters
provide the concrete implementations.
"""

from gatehouse_identity.application.dtos import LoginInput, RegisterInput
from gatehouse_identity.application.services import UserService
from gatehouse_identity.domain.role import Role, RoleRepository
from gatehouse_identity.domain.security import PasswordHasher, Tokenizer
from gatehouse_identity.domain.shared import (
    ContextCancelledError,
    DeadlineExceededError,
    ExecutionContext,
    RecordNotFoundError,
    RepositoryError,
)
from gatehouse_identity.domain.user import RoleName, User, UserRepository
from gatehouse_identity.exceptions import (
    EmailAlreadyTakenError,
    ErrorCode,
    IdentityError,
    InvalidCredentialsError,
    PasswordHashingFailedError,
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

__all__ = [
    # Domain
    "Role",
    "RoleName",
    "RoleRepository",
    "User",
    "UserRepository",
    # Contracts
    "PasswordHasher",
    "Tokenizer",
    # Execution context and repository errors
    "ContextCancelledError",
    "DeadlineExceededError",
    "ExecutionContext",
    "RecordNotFoundError",
    "RepositoryError",
    # Exceptions
    "EmailAlreadyTakenError",
    "ErrorCode",
    "IdentityError",
    "InvalidCredentialsError",
    "PasswordHashingFailedError",
    "RoleCreationFailedError",
    "RoleListFailedError",
    "RoleNotFoundError",
    "SamePasswordError",
    "TokenGenerationFailedError",
    "UserCreationFailedError",
    "UserDeletionFailedError",
    "UserListFailedError",
    "UserNotFoundError",
    "UserUpdateFailedError",
    "UsernameAlreadyExistsError",
    # Application
    "LoginInput",
    "RegisterInput",
    "UserService",
]
