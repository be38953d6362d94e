"""User data holder for identity concerns."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """
    User record as exchanged with repositories.

    Plain data with no behaviour: business rules live in ``UserService``.
    ``id`` is empty until the repository assigns one on create, and an
    empty ``role_id`` means the user has no role.
    """

    email: str
    username: str
    hashed_password: str = field(default="", repr=False)
    role_id: str = ""
    last_seen: datetime | None = None
    id: str = ""
