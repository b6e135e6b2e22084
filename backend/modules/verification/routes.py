"""
Email verification endpoints.

Mounted under the auth prefix. All routes are public.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_verification_service
from api.models.responses import APIResponse

from .interfaces import IVerificationService
from .models import EmailVerificationRequest, SubmitOtpRequest

router = APIRouter()


@router.post("/verify-email", response_model=APIResponse)
async def verify_email(
    request: EmailVerificationRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> APIResponse:
    """
    Send an OTP to an email address.

    A new code is only sent when none is pending or the previous one
    has expired.
    """
    await service.request_verification(request.email)
    return APIResponse(message="OTP sent successfully")


@router.post("/resend-email", response_model=APIResponse)
async def resend_email(
    request: EmailVerificationRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> APIResponse:
    """Same as verify-email; resending is refused while a code is pending."""
    await service.request_verification(request.email)
    return APIResponse(message="OTP sent successfully")


@router.post("/verify-otp", response_model=APIResponse)
async def verify_otp(
    request: SubmitOtpRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> APIResponse:
    """Confirm email ownership with the received OTP."""
    await service.submit_otp(request.email, request.otp)
    return APIResponse(message="Email verified successfully")
