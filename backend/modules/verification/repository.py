"""
Verification repository.

Stores one OTP record per email in the `verifications` table, which has a
unique index on email. Writes are last-write-wins.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import VerificationRecord


class VerificationRepository(BaseRepository[VerificationRecord]):
    """Repository for verification records."""

    table_name = "verifications"

    def get_by_email(self, email: str) -> Optional[VerificationRecord]:
        """Get the record for an email, or None if none exists."""
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def save_otp(self, email: str, otp: int, issued_at: int) -> VerificationRecord:
        """
        Store a freshly issued OTP, creating the record if needed.

        Upserts on the email so a concurrent request overwrites rather
        than duplicates.
        """
        data = {
            "email": email,
            "otp": otp,
            "created_at": issued_at,
            "status": False,
            "verified_at": None,
        }
        result = self._table().upsert(data, on_conflict="email").execute()
        return self._map_to_record(result.data[0] if result.data else data)

    def mark_verified(self, email: str, verified_at: int) -> None:
        """Seal the record for an email as verified."""
        data = {"status": True, "verified_at": verified_at}
        self._table().update(data).eq("email", email).execute()

    def _map_to_record(self, data: dict[str, Any]) -> VerificationRecord:
        """Map database row to VerificationRecord model."""
        return VerificationRecord(
            email=data["email"],
            otp=data.get("otp") or 0,
            created_at=data.get("created_at") or 0,
            status=bool(data.get("status", False)),
            verified_at=data.get("verified_at"),
        )
