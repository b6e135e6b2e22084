"""
Email verification exceptions.

Every rejection in the verification workflow has its own code so clients
can render a precise message. None of them are retried automatically.
"""

from shared.exceptions import (
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class EmptyEmailError(ValidationError):
    """Raised when the email field is empty."""

    def __init__(self):
        super().__init__("email can't be empty", code="EMAIL_REQUIRED")


class InvalidOtpError(ValidationError):
    """Raised when the submitted OTP is missing or not a positive number."""

    def __init__(self):
        super().__init__("otp is invalid", code="OTP_INVALID")


class OtpAlreadySentError(ConflictError):
    """Raised when an unexpired OTP was already sent to this email."""

    def __init__(self, email: str):
        super().__init__(
            "otp already sent to this email",
            code="OTP_ALREADY_SENT",
            details={"email": email},
        )


class AlreadyVerifiedError(ConflictError):
    """Raised when the email has already been verified."""

    def __init__(self, email: str):
        super().__init__(
            "email is already verified",
            code="ALREADY_VERIFIED",
            details={"email": email},
        )


class OtpExpiredError(ValidationError):
    """Raised when the OTP validity window has elapsed."""

    def __init__(self, email: str):
        super().__init__(
            "otp has expired",
            code="OTP_EXPIRED",
            details={"email": email},
        )


class OtpMismatchError(ValidationError):
    """Raised when the submitted OTP does not match the issued one."""

    def __init__(self, email: str):
        super().__init__(
            "otp does not match",
            code="OTP_MISMATCH",
            details={"email": email},
        )


class OtpNotRequestedError(NotFoundError):
    """Raised when an OTP is submitted for an email that never requested one."""

    def __init__(self, email: str):
        super().__init__(
            "no otp was requested for this email",
            code="OTP_NOT_REQUESTED",
            details={"email": email},
        )


class EmailDispatchError(ExternalServiceError):
    """Raised when the verification email could not be sent."""

    def __init__(self, reason: str):
        super().__init__(
            f"could not send verification email: {reason}",
            service="email",
            code="EMAIL_DISPATCH_FAILED",
        )
