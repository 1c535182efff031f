"""
Field format rules for patient signup and sign-in.
"""
import re
from typing import Dict

from ..exceptions import SignupValidationException, InvalidCredentialsException
from .schemas import PatientSignup

NAME_REGEX = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s'-]+$")
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$", re.IGNORECASE)
PHONE_REGEX = re.compile(r"^[6-9][0-9]{9}$")
PASSWORD_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}$")

PASSWORD_RULE_MESSAGE = (
    "Password must be at least 8 characters long, include an uppercase letter, "
    "a lowercase letter, a number, and a special character."
)

def is_valid_name(value: str) -> bool:
    return bool(NAME_REGEX.fullmatch(value))

def is_valid_email(value: str) -> bool:
    return bool(EMAIL_REGEX.fullmatch(value))

def is_valid_phone(value: str) -> bool:
    return bool(PHONE_REGEX.fullmatch(value))

def is_strong_password(value: str) -> bool:
    return bool(PASSWORD_REGEX.fullmatch(value))

def collect_signup_errors(data: PatientSignup) -> Dict[str, str]:
    """
    Check every signup field and return a map of field name to error message.

    Only the first failing rule of each field is reported. An empty map means
    the data is acceptable.
    """
    errors: Dict[str, str] = {}

    # Checked as they will be stored; the password is kept verbatim
    first_name = data.first_name.strip()
    last_name = data.last_name.strip()
    email = data.email.strip()
    phone = data.phone.strip()

    if not first_name:
        errors["firstName"] = "First name is required!"
    elif not is_valid_name(first_name):
        errors["firstName"] = "First name contains invalid characters!"

    if not last_name:
        errors["lastName"] = "Last name is required!"
    elif not is_valid_name(last_name):
        errors["lastName"] = "Last name contains invalid characters!"

    if not email:
        errors["email"] = "Email is required!"
    elif not is_valid_email(email):
        errors["email"] = "This is not a valid email format!"

    if not phone:
        errors["phone"] = "Phone is required!"
    elif not is_valid_phone(phone):
        errors["phone"] = "Not a valid mobile number"

    if not data.password:
        errors["password"] = "Password is required!"
    elif not is_strong_password(data.password):
        errors["password"] = PASSWORD_RULE_MESSAGE

    return errors

def validate_patient_signup(data: PatientSignup) -> None:
    """
    Raises:
        SignupValidationException: If any field breaks its format rule
    """
    errors = collect_signup_errors(data)
    if errors:
        raise SignupValidationException(errors)

def validate_signin(email: str, password: str) -> None:
    """
    Reject sign-in attempts that could never match a stored account.

    Password strength is not re-checked here; the stored hash decides.
    """
    if not email or not is_valid_email(email):
        raise InvalidCredentialsException("This is not a valid email format!" if email else "Email is required!")
    if not password:
        raise InvalidCredentialsException("Password is required!")
