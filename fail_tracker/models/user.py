#!/usr/bin/env python3
"""
User model for FailTracker.

A user is an identity holder: an email address plus a password-derived
credential. Users compare by identity, so two accounts sharing an email are
still different users.
"""

import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
DEFAULT_HASH_ITERATIONS = 100_000
SALT_BYTES = 16


def hash_password(password: str, salt: bytes, iterations: int = DEFAULT_HASH_ITERATIONS) -> str:
    """Derive a hex digest from a password with PBKDF2-HMAC-SHA256.

    Args:
        password: Plain text password
        salt: Random salt bytes
        iterations: PBKDF2 iteration count

    Returns:
        Hex encoded digest
    """
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)
    return digest.hex()


@dataclass(eq=False)
class User:
    """Tracker user with validation and credential handling."""
    email_address: str
    password_hash: str = field(repr=False)
    password_salt: str = field(repr=False)
    hash_iterations: int = field(default=DEFAULT_HASH_ITERATIONS, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        self._validate_email()
        self._validate_credential()

        if not isinstance(self.created_at, datetime):
            raise TypeError("created_at must be a datetime object")

    def _validate_email(self) -> None:
        """Validate email address."""
        if not isinstance(self.email_address, str):
            raise TypeError("email_address must be a string")
        if not EMAIL_PATTERN.match(self.email_address.strip()):
            raise ValueError(f"Invalid email address: {self.email_address!r}")

    def _validate_credential(self) -> None:
        """Validate stored credential fields."""
        for field_name, field_value in (('password_hash', self.password_hash),
                                        ('password_salt', self.password_salt)):
            if not isinstance(field_value, str) or not field_value:
                raise ValueError(f"{field_name} must be a non-empty string")
        if not isinstance(self.hash_iterations, int) or self.hash_iterations <= 0:
            raise ValueError("hash_iterations must be a positive integer")

    @classmethod
    def create_new_user(
        cls,
        email_address: str,
        password: str,
        iterations: int = DEFAULT_HASH_ITERATIONS
    ) -> 'User':
        """Create a new user, hashing the password with a fresh salt.

        Args:
            email_address: User's email address
            password: Plain text password (never stored)
            iterations: PBKDF2 iteration count

        Returns:
            User instance

        Raises:
            TypeError: If email or password are not strings
            ValueError: If email is malformed or password is empty
        """
        if not isinstance(password, str):
            raise TypeError("password must be a string")
        if not password:
            raise ValueError("password cannot be empty")
        if not isinstance(email_address, str):
            raise TypeError("email_address must be a string")

        salt = secrets.token_bytes(SALT_BYTES)
        return cls(
            email_address=email_address.strip(),
            password_hash=hash_password(password, salt, iterations),
            password_salt=salt.hex(),
            hash_iterations=iterations
        )

    def verify_password(self, candidate: str) -> bool:
        """Check a candidate password against the stored credential.

        Args:
            candidate: Plain text password to check

        Returns:
            True if the password matches
        """
        if not isinstance(candidate, str):
            return False
        digest = hash_password(candidate, bytes.fromhex(self.password_salt), self.hash_iterations)
        return hmac.compare_digest(digest, self.password_hash)

    def get_display_name(self) -> str:
        """Get user's display name (local part of the email)."""
        return self.email_address.split('@', 1)[0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary for serialization.

        The credential is not included.
        """
        return {
            'email_address': self.email_address,
            'created_at': self.created_at.isoformat()
        }

    def __str__(self) -> str:
        """String representation of the user."""
        return self.email_address


def email_of(user: Optional[User]) -> Optional[str]:
    """Email of a possibly absent user."""
    return user.email_address if user is not None else None
