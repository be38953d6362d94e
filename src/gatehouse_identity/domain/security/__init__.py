"""Credential contracts: password hashing and token issuance."""

from gatehouse_identity.domain.security.password_hasher import PasswordHasher
from gatehouse_identity.domain.security.tokenizer import Tokenizer

__all__ = [
    "PasswordHasher",
    "Tokenizer",
]
