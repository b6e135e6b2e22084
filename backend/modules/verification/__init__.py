"""
Email verification module.

Issues OTPs by email and records when an address has been verified.

Public API:
- IVerificationService: Interface for the verification workflow
- IEmailSender: Interface for OTP email dispatch
- VerificationRecord, VerificationState: Models
- Verification exceptions
"""

from .interfaces import IVerificationService
from .mailer import IEmailSender
from .models import VerificationRecord, VerificationState
from .exceptions import (
    EmptyEmailError,
    InvalidOtpError,
    OtpAlreadySentError,
    AlreadyVerifiedError,
    OtpExpiredError,
    OtpMismatchError,
    OtpNotRequestedError,
    EmailDispatchError,
)

__all__ = [
    "IVerificationService",
    "IEmailSender",
    "VerificationRecord",
    "VerificationState",
    "EmptyEmailError",
    "InvalidOtpError",
    "OtpAlreadySentError",
    "AlreadyVerifiedError",
    "OtpExpiredError",
    "OtpMismatchError",
    "OtpNotRequestedError",
    "EmailDispatchError",
]
