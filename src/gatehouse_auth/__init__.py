"""Gatehouse Auth - Credential infrastructure.

Concrete implementations of the credential contracts declared in
``gatehouse_identity.domain.security``:
- Password hashing (bcrypt) -> ``PasswordHasher``
- JWT token creation and verification -> ``Tokenizer``

Usage:
    from gatehouse_auth import JWTService, PasswordHashingService

    hasher = PasswordHashingService(rounds=12)
    tokenizer = JWTService(secret_key="...")
"""

from gatehouse_auth.exceptions import AuthError, InvalidTokenError, WeakPasswordError
from gatehouse_auth.schemas import TokenPayload
from gatehouse_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
