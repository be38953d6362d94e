"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The opaque identifier of the user (``sub`` claim)
    email
        The user's email address
    exp
        Token expiration timestamp
    token_type
        Always "access" for tokens issued on login
    """

    user_id: str
    email: str
    exp: datetime
    token_type: str = "access"

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        return self.token_type == "access"
