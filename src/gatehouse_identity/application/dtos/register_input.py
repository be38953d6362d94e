from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegisterInput:
    """Registration request as received from a transport adapter."""

    email: str
    username: str
    password: str = field(repr=False)
