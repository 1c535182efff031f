"""
Patient account service layer for business logic.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.security import hash_password, verify_password, create_access_token
from ..exceptions import (
    EmailAlreadyExistsException,
    PatientNotFoundException,
    InvalidCredentialsException
)
from . import repository
from .models import Patient
from .schemas import PatientSignup
from .validation import validate_patient_signup, validate_signin

# Set up logging
logger = logging.getLogger(__name__)

async def sign_up_patient(db: Session, data: PatientSignup) -> Patient:
    """
    Register a new patient account.

    Args:
        db: Database session
        data: Signup form fields

    Returns:
        The created, not yet verified, patient

    Raises:
        SignupValidationException: If a field breaks its format rule
        EmailAlreadyExistsException: If the email is already registered
    """
    logger.info(f"Patient signup attempt for email: {data.email}")
    validate_patient_signup(data)

    existing_patient = repository.find_patient_by_email(db, data.email)
    if existing_patient:
        logger.warning(f"Signup failed: Email {data.email} already registered")
        raise EmailAlreadyExistsException()

    try:
        patient = repository.create_patient(
            db,
            email=data.email,
            password_hash=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone
        )
    except IntegrityError:
        # A concurrent signup won the unique index
        db.rollback()
        logger.warning(f"Signup failed: Email {data.email} registered concurrently")
        raise EmailAlreadyExistsException()

    logger.info(f"Patient account created: {patient.id}")
    return patient

async def sign_in_patient(db: Session, email: str, password: str) -> str:
    """
    Authenticate a patient and issue an access token.

    Returns:
        str: Signed JWT carrying the patient id

    Raises:
        PatientNotFoundException: If no patient has this email
        InvalidCredentialsException: If the password does not match
    """
    validate_signin(email, password)

    patient = repository.find_patient_by_email(db, email)
    if not patient:
        logger.warning(f"Sign-in failed: No patient registered as {email}")
        raise PatientNotFoundException()

    if not verify_password(password, patient.password):
        logger.warning(f"Sign-in failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    token = create_access_token({"id": str(patient.id)})
    logger.info(f"Sign-in successful: Patient {patient.id}")
    return token
