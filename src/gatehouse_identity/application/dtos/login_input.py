from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoginInput:
    """Login request as received from a transport adapter."""

    email: str
    password: str = field(repr=False)
