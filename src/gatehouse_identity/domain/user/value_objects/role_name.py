from enum import Enum


class RoleName(str, Enum):
    """Well-known role names (who will be admin and who not)."""

    USER = "user"
    ADMIN = "admin"
