"""
Pytest configuration for gatehouse_identity tests.

Provides the execution context, in-memory repositories and a user service
wired with real (fast) credential services.
"""

import pytest

from gatehouse_auth import JWTService, PasswordHashingService
from gatehouse_identity import ExecutionContext, UserService
from tests.shared.fixtures.fakes import InMemoryRoleRepository, InMemoryUserRepository

TEST_JWT_SECRET = "test-secret-key-12345"


@pytest.fixture
def ctx() -> ExecutionContext:
    return ExecutionContext.background()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def role_repo() -> InMemoryRoleRepository:
    return InMemoryRoleRepository()


@pytest.fixture
def password_hasher() -> PasswordHashingService:
    """bcrypt hasher with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def tokenizer() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def user_service(user_repo, role_repo, password_hasher, tokenizer) -> UserService:
    return UserService(
        user_repository=user_repo,
        role_repository=role_repo,
        password_hasher=password_hasher,
        tokenizer=tokenizer,
    )
