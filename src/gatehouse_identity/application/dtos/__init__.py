"""Input carriers for the user service. No validation happens here."""

from gatehouse_identity.application.dtos.login_input import LoginInput
from gatehouse_identity.application.dtos.register_input import RegisterInput

__all__ = [
    "LoginInput",
    "RegisterInput",
]
