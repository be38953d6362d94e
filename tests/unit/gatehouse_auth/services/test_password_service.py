"""Unit tests for PasswordHashingService."""

import pytest

from gatehouse_auth.exceptions import WeakPasswordError
from gatehouse_auth.services import PasswordHashingService
from gatehouse_identity.domain.security import PasswordHasher


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_implements_password_hasher(self):
        assert isinstance(self.service, PasswordHasher)

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        password = "secure_password123"
        hashed = self.service.hash(password)

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        # bcrypt hashes are ~60 characters
        assert len(hashed) >= 50

    def test_hash_uses_configured_rounds(self):
        assert self.service.hash("secure_password123").startswith("$2b$04$")

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        password = "my_secret_password"
        hashed = self.service.hash(password)

        assert self.service.verify(hashed, password) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify(hashed, "wrong_password") is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("not_a_valid_hash", "password") is False
        assert self.service.verify("", "password") is False

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        # But both should verify
        assert self.service.verify(hash1, password)
        assert self.service.verify(hash2, password)


class TestPasswordValidation:
    """Tests for password strength validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)

    def test_validate_empty_password_raises(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.validate_strength("")

    def test_validate_short_password_raises(self):
        with pytest.raises(WeakPasswordError, match="at least 8 characters"):
            self.service.validate_strength("short")

    def test_validate_too_long_password_raises(self):
        """bcrypt ignores input past 72 bytes, so longer passwords are refused."""
        with pytest.raises(WeakPasswordError, match="cannot exceed 72 bytes"):
            self.service.validate_strength("a" * 73)

    def test_validate_multibyte_length_counts_bytes(self):
        # 25 characters, 75 bytes
        with pytest.raises(WeakPasswordError, match="cannot exceed 72 bytes"):
            self.service.validate_strength("€" * 25)

    def test_validate_valid_password_succeeds(self):
        """Test that valid password passes validation."""
        # Should not raise
        self.service.validate_strength("valid_password_123")
        self.service.validate_strength("a" * 72)

    def test_hash_validates_password(self):
        """Test that hash method validates password strength."""
        with pytest.raises(WeakPasswordError):
            self.service.hash("short")
