"""
Password hashing.

bcrypt via pwdlib with a fixed, configurable cost. Hashing failures are
reported as an empty string so callers can refuse to store them.
"""

import logging
from typing import Optional

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of a password.
MAX_PASSWORD_BYTES = 72


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """Salted one-way hashing and verification of passwords."""

    def __init__(self, rounds: int = 4):
        self._hash = PasswordHash((BcryptHasher(rounds=rounds),))
        self._dummy_hash: Optional[str] = None

    def hash(self, plaintext: str) -> str:
        """
        Hash a password.

        Returns:
            The encoded bcrypt hash, or "" if hashing failed.
        """
        try:
            return self._hash.hash(plaintext)
        except (ValueError, TypeError):
            logger.exception("Password hashing failed")
            return ""

    def verify(self, stored: str, plaintext: str) -> bool:
        """
        Check a password against a stored hash.

        A malformed or empty stored hash counts as a mismatch.
        """
        if not stored or not plaintext:
            return False
        try:
            return self._hash.verify(plaintext, stored)
        except (UnknownHashError, ValueError, TypeError):
            return False

    def verify_dummy(self, plaintext: str) -> bool:
        """
        Spend one verification on a throwaway hash.

        Used when there is no stored hash so that an unknown account costs
        the same as a wrong password. Always returns False.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self._hash.hash("dummy-password")
        self.verify(self._dummy_hash, plaintext or "-")
        return False
