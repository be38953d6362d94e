"""User domain manages user identity only.

This domain handles:
- User record (id, email, username, password hash, role reference)
- Well-known role names
- The user repository contract
"""

from gatehouse_identity.domain.user.aggregates import User
from gatehouse_identity.domain.user.repositories import UserRepository
from gatehouse_identity.domain.user.value_objects import RoleName

__all__ = [
    "RoleName",
    "User",
    "UserRepository",
]
