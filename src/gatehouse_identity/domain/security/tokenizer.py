"""Tokenizer interface for the security domain."""

from abc import ABC, abstractmethod


class Tokenizer(ABC):
    """Domain service interface for bearer token issuance."""

    @abstractmethod
    def generate_token(self, email: str, user_id: str) -> str:
        """Issue a token proving a successful login for this user."""

    @abstractmethod
    def validate_token(self, token: str) -> str:
        """
        Validate a token and return the user ID it was issued for.

        Raises
        ------
        Exception
            If the token is invalid, expired or malformed
        """
