"""
Email verification interface.
"""

from typing import Protocol, runtime_checkable

from .models import VerificationRecord


@runtime_checkable
class IVerificationService(Protocol):
    """
    Interface for the email verification workflow.

    Drives an email through NONE -> PENDING -> (EXPIRED ->) VERIFIED.
    """

    async def request_verification(self, email: str) -> VerificationRecord:
        """
        Issue and send an OTP for an email.

        Raises:
            EmptyEmailError: If the email is empty
            AlreadyVerifiedError: If the email is already verified
            OtpAlreadySentError: If an unexpired OTP exists
            EmailDispatchError: If the email could not be sent
        """
        ...

    async def submit_otp(self, email: str, otp: int) -> None:
        """
        Check a submitted OTP and seal the record as verified.

        Raises:
            EmptyEmailError: If the email is empty
            InvalidOtpError: If the OTP is not a positive number
            OtpNotRequestedError: If no OTP was ever issued
            AlreadyVerifiedError: If the email is already verified
            OtpExpiredError: If the validity window has elapsed
            OtpMismatchError: If the OTP does not match
        """
        ...

    async def is_verified(self, email: str) -> bool:
        """Whether the email has completed verification."""
        ...
