"""
Verification email dispatch.

SendGridMailer posts to the SendGrid v3 mail API. ConsoleMailer only logs
the code and is meant for local development.
"""

import logging
from typing import Protocol, runtime_checkable

import httpx

from shared.models import mask_email

from .exceptions import EmailDispatchError
from .otp import format_otp

logger = logging.getLogger(__name__)

SUBJECT = "OTP verification mail"


def render_otp_body(otp: int) -> str:
    return f"<p>Your verification code is <strong>{format_otp(otp)}</strong></p>"


@runtime_checkable
class IEmailSender(Protocol):
    """Sends the OTP email to a recipient."""

    async def send_otp(self, email: str, otp: int) -> None:
        """
        Send an OTP to an email address.

        Raises:
            EmailDispatchError: If the message could not be delivered
        """
        ...


class SendGridMailer(IEmailSender):
    """Sends OTP emails through SendGrid."""

    SENDGRID_API_URL = "https://api.sendgrid.com/v3/mail/send"

    def __init__(self, api_key: str, sender: str, timeout: float = 10.0):
        self._api_key = api_key
        self._sender = sender
        self._timeout = timeout

    async def send_otp(self, email: str, otp: int) -> None:
        if not self._api_key:
            raise EmailDispatchError("SENDGRID_API_KEY is not set")

        message = {
            "personalizations": [{"to": [{"email": email}]}],
            "from": {"email": self._sender},
            "subject": SUBJECT,
            "content": [{"type": "text/html", "value": render_otp_body(otp)}],
        }
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.SENDGRID_API_URL,
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "Content-Type": "application/json",
                    },
                    json=message,
                    timeout=self._timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"SendGrid rejected verification email for {mask_email(email)}: {e}")
            raise EmailDispatchError(str(e)) from e


class ConsoleMailer(IEmailSender):
    """Logs OTPs instead of sending them."""

    async def send_otp(self, email: str, otp: int) -> None:
        logger.info(f"Verification code for {email}: {format_otp(otp)}")


def build_mailer(backend: str, api_key: str, sender: str) -> IEmailSender:
    """Pick the mailer for the configured email backend."""
    if backend == "console":
        return ConsoleMailer()
    if backend == "sendgrid":
        return SendGridMailer(api_key, sender)
    raise ValueError(f"Unknown email backend: {backend}")
