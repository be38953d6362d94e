"""Password hasher interface for the security domain."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Domain service interface for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password

        Returns
        -------
        Opaque hash suitable for storage

        Raises
        ------
        Exception
            Any failure; callers treat it as "hashing failed"
        """

    @abstractmethod
    def verify(self, hashed_password: str, password: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Never raises: a mismatch or a corrupt hash returns False.
        """
