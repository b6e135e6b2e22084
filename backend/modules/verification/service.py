"""
Email verification service.

Implements the OTP state machine on top of the verification repository
and an email sender. Concurrent requests for the same email are not
coordinated; the last write wins.
"""

import logging
import time
from typing import Callable

from shared.models import mask_email

from .exceptions import (
    AlreadyVerifiedError,
    EmptyEmailError,
    InvalidOtpError,
    OtpAlreadySentError,
    OtpExpiredError,
    OtpMismatchError,
    OtpNotRequestedError,
)
from .interfaces import IVerificationService
from .mailer import IEmailSender
from .models import VerificationRecord, VerificationState, record_state
from .otp import generate_otp
from .repository import VerificationRepository

logger = logging.getLogger(__name__)


def _epoch_now() -> int:
    return int(time.time())


class VerificationService(IVerificationService):
    """OTP issuance and validation for email ownership."""

    def __init__(
        self,
        repository: VerificationRepository,
        mailer: IEmailSender,
        validity_seconds: int,
        clock: Callable[[], int] = _epoch_now,
        otp_generator: Callable[[], int] = generate_otp,
    ):
        self._repo = repository
        self._mailer = mailer
        self._window = validity_seconds
        self._clock = clock
        self._generate_otp = otp_generator

    async def request_verification(self, email: str) -> VerificationRecord:
        if not email:
            raise EmptyEmailError()

        now = self._clock()
        record = self._repo.get_by_email(email)
        state = record_state(record, now, self._window)

        if state == VerificationState.VERIFIED:
            raise AlreadyVerifiedError(email)
        if state == VerificationState.PENDING:
            raise OtpAlreadySentError(email)

        otp = self._generate_otp()
        # Nothing is stored unless the email actually went out.
        await self._mailer.send_otp(email, otp)
        saved = self._repo.save_otp(email, otp, issued_at=now)

        if state == VerificationState.EXPIRED:
            logger.info(f"Reissued expired OTP for {mask_email(email)}")
        else:
            logger.info(f"Issued OTP for {mask_email(email)}")
        return saved

    async def submit_otp(self, email: str, otp: int) -> None:
        if not email:
            raise EmptyEmailError()
        if otp is None or otp <= 0:
            raise InvalidOtpError()

        now = self._clock()
        record = self._repo.get_by_email(email)
        state = record_state(record, now, self._window)

        if state == VerificationState.NONE:
            raise OtpNotRequestedError(email)
        if state == VerificationState.VERIFIED:
            raise AlreadyVerifiedError(email)
        if state == VerificationState.EXPIRED:
            raise OtpExpiredError(email)
        if record.otp != otp:
            raise OtpMismatchError(email)

        self._repo.mark_verified(email, verified_at=now)
        logger.info(f"Verified email {mask_email(email)}")

    async def is_verified(self, email: str) -> bool:
        record = self._repo.get_by_email(email)
        return record is not None and record.status
