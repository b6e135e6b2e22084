"""
Email verification data models.

One VerificationRecord exists per email. Its state is derived from the
stored OTP, the issuance time, the verified flag and the validity window.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class VerificationState(str, Enum):
    """Lifecycle of an email's verification."""
    NONE = "none"
    PENDING = "pending"
    EXPIRED = "expired"
    VERIFIED = "verified"


class VerificationRecord(BaseModel):
    """Stored OTP record for one email."""

    email: str
    otp: int = Field(default=0, description="Current OTP, 0 when none was issued")
    created_at: int = Field(default=0, description="OTP issuance time (epoch seconds)")
    status: bool = Field(default=False, description="Whether the email is verified")
    verified_at: Optional[int] = None

    def is_expired(self, now: int, window_seconds: int) -> bool:
        return now > self.created_at + window_seconds

    def state(self, now: int, window_seconds: int) -> VerificationState:
        if self.status:
            return VerificationState.VERIFIED
        if self.otp == 0:
            return VerificationState.NONE
        if self.is_expired(now, window_seconds):
            return VerificationState.EXPIRED
        return VerificationState.PENDING


def record_state(
    record: Optional[VerificationRecord],
    now: int,
    window_seconds: int,
) -> VerificationState:
    """State of an email given its (possibly missing) record."""
    if record is None:
        return VerificationState.NONE
    return record.state(now, window_seconds)


class EmailVerificationRequest(BaseModel):
    """Request an OTP for an email."""

    email: str = ""


class SubmitOtpRequest(BaseModel):
    """Submit the OTP received by email."""

    email: str = ""
    otp: int = 0
