"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        data = TestUserFactory.alice_registration()
"""

from dataclasses import dataclass

from gatehouse_identity import LoginInput, RegisterInput


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for registration and login inputs with fixed values."""

    __test__ = False

    DEFAULT_EMAIL = "test@example.com"
    DEFAULT_USERNAME = "test"
    DEFAULT_PASSWORD = "secure_password_123"

    ALICE_EMAIL = "alice@example.com"
    ALICE_USERNAME = "alice"
    ALICE_PASSWORD = "alice_password_123"

    BOB_EMAIL = "bob@example.com"
    BOB_USERNAME = "bob"
    BOB_PASSWORD = "bob_password_123"

    @classmethod
    def default_registration(cls) -> RegisterInput:
        return RegisterInput(
            email=cls.DEFAULT_EMAIL,
            username=cls.DEFAULT_USERNAME,
            password=cls.DEFAULT_PASSWORD,
        )

    @classmethod
    def alice_registration(cls) -> RegisterInput:
        return RegisterInput(
            email=cls.ALICE_EMAIL,
            username=cls.ALICE_USERNAME,
            password=cls.ALICE_PASSWORD,
        )

    @classmethod
    def bob_registration(cls) -> RegisterInput:
        return RegisterInput(
            email=cls.BOB_EMAIL,
            username=cls.BOB_USERNAME,
            password=cls.BOB_PASSWORD,
        )

    @classmethod
    def login(cls, registration: RegisterInput, password: str | None = None) -> LoginInput:
        return LoginInput(
            email=registration.email,
            password=registration.password if password is None else password,
        )
