"""
FastAPI dependencies for bearer token authentication.
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Optional

from ..database import get_db
from ..exceptions import InvalidTokenException
from ..patients.models import Patient
from ..patients.repository import find_patient_by_id
from .security import verify_token

# auto_error is off so a missing header yields our JSON error body
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_patient(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> Patient:
    """
    Get current authenticated patient from JWT token with database verification.

    Raises:
        InvalidTokenException: If the token is missing, invalid, or the patient is gone
    """
    if credentials is None:
        raise InvalidTokenException("Not authenticated")

    payload = verify_token(credentials.credentials)
    if not payload:
        raise InvalidTokenException()

    patient_id = payload.get("id")
    if patient_id is None:
        raise InvalidTokenException("Invalid token payload")

    try:
        patient = find_patient_by_id(db, int(patient_id))
    except (TypeError, ValueError):
        raise InvalidTokenException("Invalid token payload")

    if not patient:
        raise InvalidTokenException("User not found")

    return patient
