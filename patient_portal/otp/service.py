"""
OTP service layer: issue, deliver and check email verification codes.
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import (
    PatientNotFoundException,
    AlreadyVerifiedException,
    EmailDeliveryException
)
from ..patients import repository as patient_repository
from ..patients.repository import normalize_email
from .email import EmailService
from .models import OtpCode

# Set up logging
logger = logging.getLogger(__name__)

def generate_otp(length: Optional[int] = None) -> str:
    """
    Generate a numeric one-time password.

    Args:
        length: Number of digits (default: ``settings.otp_length``)
    """
    length = length or settings.otp_length
    return "".join(secrets.choice("0123456789") for _ in range(length))

def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

def store_otp(db: Session, email: str, code: str) -> OtpCode:
    """
    Save ``code`` as the outstanding OTP for ``email``, replacing any previous one.
    """
    email = normalize_email(email)
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.otp_expire_minutes)

    otp = db.query(OtpCode).filter(OtpCode.email == email).first()
    if otp:
        otp.code = code
        otp.expires_at = expires_at
    else:
        otp = OtpCode(email=email, code=code, expires_at=expires_at)
        db.add(otp)
    db.commit()
    db.refresh(otp)
    return otp

async def send_verification_email(db: Session, email: str, email_service: EmailService) -> None:
    """
    Issue a fresh OTP for a registered, unverified patient and email it.

    Raises:
        PatientNotFoundException: If no patient has this email
        AlreadyVerifiedException: If the patient is already verified
        EmailDeliveryException: If the mail transport fails
    """
    patient = patient_repository.find_patient_by_email(db, email)
    if not patient:
        logger.warning(f"OTP send failed: Email {email} not found")
        raise PatientNotFoundException()

    if patient.is_verified:
        logger.info(f"OTP send skipped: {email} already verified")
        raise AlreadyVerifiedException()

    code = generate_otp()
    store_otp(db, patient.email, code)

    try:
        await email_service.send_otp_email(patient.email, code)
    except Exception as e:
        logger.error(f"Failed to send verification email to {email}: {str(e)}")
        raise EmailDeliveryException() from e

    logger.info(f"OTP issued for patient {patient.id}")

async def verify_email(db: Session, email: str, otp: str) -> bool:
    """
    Check ``otp`` against the outstanding code for ``email``.

    A matching, unexpired code is consumed and the patient is marked as
    verified. Expired codes are discarded.

    Returns:
        bool: True if the email is now verified
    """
    email = normalize_email(email)
    stored = db.query(OtpCode).filter(OtpCode.email == email).first()
    if not stored:
        logger.warning(f"Verification failed: No outstanding OTP for {email}")
        return False

    if _as_utc(stored.expires_at) <= datetime.now(timezone.utc):
        logger.warning(f"Verification failed: OTP for {email} expired")
        db.delete(stored)
        db.commit()
        return False

    if not secrets.compare_digest(stored.code.encode(), otp.strip().encode()):
        logger.warning(f"Verification failed: Invalid OTP for {email}")
        return False

    patient = patient_repository.verify_patient(db, email)
    if not patient:
        logger.warning(f"Verification failed: Patient {email} no longer exists")
        return False

    db.delete(stored)
    db.commit()
    logger.info(f"Email verified: {email}")
    return True
