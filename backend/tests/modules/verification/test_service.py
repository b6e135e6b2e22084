"""Tests for the email verification service."""

import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.verification.exceptions import (
    AlreadyVerifiedError,
    EmailDispatchError,
    EmptyEmailError,
    InvalidOtpError,
    OtpAlreadySentError,
    OtpExpiredError,
    OtpMismatchError,
    OtpNotRequestedError,
)
from modules.verification.models import VerificationRecord
from modules.verification.service import VerificationService

from tests.fakes import InMemoryVerificationRepository

NOW = 1_700_000_000
WINDOW = 86400


class FakeClock:
    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def repo() -> InMemoryVerificationRepository:
    return InMemoryVerificationRepository()


@pytest.fixture
def mailer() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(repo, mailer, clock) -> VerificationService:
    return VerificationService(
        repository=repo,
        mailer=mailer,
        validity_seconds=WINDOW,
        clock=clock,
        otp_generator=MagicMock(side_effect=[1234, 1555, 1777]),
    )


class TestRequestVerification:
    @pytest.mark.asyncio
    async def test_first_request_sends_and_stores(self, service, repo, mailer):
        record = await service.request_verification("a@x.com")

        mailer.send_otp.assert_awaited_once_with("a@x.com", 1234)
        assert record.otp == 1234
        assert repo.records["a@x.com"].created_at == NOW
        assert repo.records["a@x.com"].status is False

    @pytest.mark.asyncio
    async def test_empty_email(self, service, mailer):
        with pytest.raises(EmptyEmailError):
            await service.request_verification("")
        mailer.send_otp.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pending_otp_is_not_resent(self, service, repo, mailer, clock):
        await service.request_verification("a@x.com")
        clock.now += 3600

        with pytest.raises(OtpAlreadySentError):
            await service.request_verification("a@x.com")

        assert mailer.send_otp.await_count == 1
        assert repo.records["a@x.com"].otp == 1234

    @pytest.mark.asyncio
    async def test_expired_otp_is_reissued(self, service, repo, mailer, clock):
        """After the window a fresh code replaces the old one."""
        await service.request_verification("a@x.com")
        clock.now += WINDOW + 1

        await service.request_verification("a@x.com")

        assert repo.records["a@x.com"].otp == 1555
        assert repo.records["a@x.com"].created_at == NOW + WINDOW + 1
        assert mailer.send_otp.await_count == 2

    @pytest.mark.asyncio
    async def test_verified_email_is_refused(self, service, repo):
        repo.records["a@x.com"] = VerificationRecord(
            email="a@x.com", otp=1234, created_at=NOW, status=True, verified_at=NOW,
        )
        with pytest.raises(AlreadyVerifiedError):
            await service.request_verification("a@x.com")

    @pytest.mark.asyncio
    async def test_dispatch_failure_stores_nothing(self, service, repo, mailer):
        mailer.send_otp.side_effect = EmailDispatchError("provider down")

        with pytest.raises(EmailDispatchError):
            await service.request_verification("a@x.com")

        assert "a@x.com" not in repo.records


class TestSubmitOtp:
    @pytest.mark.asyncio
    async def test_correct_otp_verifies(self, service, repo):
        await service.request_verification("a@x.com")

        await service.submit_otp("a@x.com", 1234)

        assert repo.records["a@x.com"].status is True
        assert repo.records["a@x.com"].verified_at == NOW
        assert await service.is_verified("a@x.com") is True

    @pytest.mark.asyncio
    async def test_wrong_otp(self, service, repo):
        await service.request_verification("a@x.com")

        with pytest.raises(OtpMismatchError):
            await service.submit_otp("a@x.com", 1111)

        assert repo.records["a@x.com"].status is False

    @pytest.mark.asyncio
    async def test_expired_otp_is_checked_before_value(self, service, clock):
        """Even the right code is refused once the window has passed."""
        await service.request_verification("a@x.com")
        clock.now += WINDOW + 1

        with pytest.raises(OtpExpiredError):
            await service.submit_otp("a@x.com", 1234)

    @pytest.mark.asyncio
    async def test_last_second_of_window(self, service, clock):
        await service.request_verification("a@x.com")
        clock.now += WINDOW

        await service.submit_otp("a@x.com", 1234)

    @pytest.mark.asyncio
    async def test_already_verified(self, service):
        await service.request_verification("a@x.com")
        await service.submit_otp("a@x.com", 1234)

        with pytest.raises(AlreadyVerifiedError):
            await service.submit_otp("a@x.com", 1234)

    @pytest.mark.asyncio
    async def test_never_requested(self, service):
        with pytest.raises(OtpNotRequestedError):
            await service.submit_otp("a@x.com", 1234)

    @pytest.mark.asyncio
    async def test_empty_email(self, service):
        with pytest.raises(EmptyEmailError):
            await service.submit_otp("", 1234)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("otp", [0, -5])
    async def test_non_positive_otp(self, service, otp):
        with pytest.raises(InvalidOtpError):
            await service.submit_otp("a@x.com", otp)


class TestIsVerified:
    @pytest.mark.asyncio
    async def test_unknown_email(self, service):
        assert await service.is_verified("a@x.com") is False

    @pytest.mark.asyncio
    async def test_pending_email(self, service):
        await service.request_verification("a@x.com")
        assert await service.is_verified("a@x.com") is False


class TestLogging:
    @pytest.mark.asyncio
    async def test_addresses_are_masked(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="modules.verification.service"):
            await service.request_verification("alice@example.com")
            await service.submit_otp("alice@example.com", 1234)

        assert "alice@example.com" not in caplog.text
        assert "a***@example.com" in caplog.text
