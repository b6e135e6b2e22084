"""
In-memory repositories for tests.

They honour the same contracts as the Supabase-backed repositories:
lookups return None when absent and email is unique.
"""

import uuid

from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import User, UserRole
from modules.verification.models import VerificationRecord


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository."""

    def __init__(self, *users: User):
        self.users = {u.id: u for u in users}

    def insert(self, name, email, phone, password_hash, user_type=UserRole.NORMAL):
        if self.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)
        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            phone=phone,
            password=password_hash,
            user_type=user_type,
            created_at=1700000000,
            updated_at=1700000000,
        )
        self.users[user.id] = user
        return user

    def get_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email), None)

    def get_by_id(self, user_id):
        return self.users.get(user_id)

    def update(self, user):
        self.users[user.id] = user
        return user


class InMemoryVerificationRepository:
    """Dict-backed stand-in for VerificationRepository."""

    def __init__(self):
        self.records: dict[str, VerificationRecord] = {}

    def get_by_email(self, email):
        record = self.records.get(email)
        return record.model_copy() if record else None

    def save_otp(self, email, otp, issued_at):
        self.records[email] = VerificationRecord(email=email, otp=otp, created_at=issued_at)
        return self.records[email]

    def mark_verified(self, email, verified_at):
        record = self.records[email]
        self.records[email] = record.model_copy(update={"status": True, "verified_at": verified_at})
