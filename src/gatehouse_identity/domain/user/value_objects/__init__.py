"""Value objects for the user domain."""

from gatehouse_identity.domain.user.value_objects.role_name import RoleName

__all__ = [
    "RoleName",
]
