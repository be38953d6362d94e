"""Auth services - password hashing and JWT."""

from gatehouse_auth.services.jwt_service import JWTService
from gatehouse_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
