"""
OTP routes: send and verify email verification codes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..exceptions import InvalidOtpException
from .email import EmailService, get_email_service
from .schemas import SendOtpRequest, VerifyOtpRequest, MessageResponse
from .service import send_verification_email, verify_email

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/send", response_model=MessageResponse, status_code=status.HTTP_200_OK, summary="Send Verification OTP")
async def send_otp_route(
    request_data: SendOtpRequest,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service)
):
    """
    Email a fresh one-time password to a registered patient.

    Raises:
        PatientNotFoundException: 400 if the email is not registered
        AlreadyVerifiedException: 400 if the account is already verified
        EmailDeliveryException: 500 if the mail could not be sent
    """
    await send_verification_email(db, request_data.email, email_service)
    return {"message": "OTP sent successfully"}

@router.post("/verify", response_model=MessageResponse, status_code=status.HTTP_200_OK, summary="Verify Email OTP")
async def verify_otp_route(
    request_data: VerifyOtpRequest,
    db: Session = Depends(get_db)
):
    is_verified = await verify_email(db, request_data.email, request_data.otp)
    if not is_verified:
        raise InvalidOtpException()
    return {"message": "Email verified"}
