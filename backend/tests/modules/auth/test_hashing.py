"""Tests for password hashing."""

from unittest.mock import patch

from modules.auth.hashing import MAX_PASSWORD_BYTES, PasswordHasher, password_too_long


class TestPasswordHasher:
    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self):
        hashed = self.hasher.hash("1234")
        assert hashed
        assert hashed != "1234"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        """Two hashes of the same password should differ."""
        assert self.hasher.hash("1234") != self.hasher.hash("1234")

    def test_verify_round_trip(self):
        hashed = self.hasher.hash("1234")
        assert self.hasher.verify(hashed, "1234") is True
        assert self.hasher.verify(hashed, "12345") is False

    def test_verify_malformed_hash(self):
        """A stored value that is not a hash is a mismatch, not an error."""
        assert self.hasher.verify("plaintext-password", "plaintext-password") is False

    def test_verify_empty_values(self):
        hashed = self.hasher.hash("1234")
        assert self.hasher.verify("", "1234") is False
        assert self.hasher.verify(hashed, "") is False

    def test_hash_failure_returns_empty_string(self):
        """A hashing failure should yield the empty sentinel."""
        with patch.object(self.hasher._hash, "hash", side_effect=ValueError("boom")):
            assert self.hasher.hash("1234") == ""

    def test_verify_dummy_is_always_false(self):
        assert self.hasher.verify_dummy("1234") is False
        assert self.hasher.verify_dummy("") is False


class TestLongPasswords:
    """bcrypt reads at most 72 bytes of a password."""

    def test_password_too_long_counts_bytes(self):
        assert not password_too_long("p" * MAX_PASSWORD_BYTES)
        assert password_too_long("p" * (MAX_PASSWORD_BYTES + 1))
        # 25 three-byte characters are 75 bytes
        assert password_too_long("€" * 25)

    def test_verify_dummy_with_long_password(self):
        """The unknown-account path must not fail where verify() would not."""
        hasher = PasswordHasher(rounds=4)
        assert hasher.verify_dummy("p" * 100) is False

    def test_verify_with_long_password(self):
        hasher = PasswordHasher(rounds=4)
        assert hasher.verify(hasher.hash("1234"), "p" * 100) is False
