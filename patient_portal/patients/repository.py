"""
Data access for patient records.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from .models import Patient

logger = logging.getLogger(__name__)

def normalize_email(email: str) -> str:
    return email.strip().lower()

def create_patient(
    db: Session,
    email: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    phone: str
) -> Patient:
    """
    Persist a new patient. The caller is responsible for hashing the password.
    """
    patient = Patient(
        email=normalize_email(email),
        password=password_hash,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        phone=phone.strip(),
        is_verified=False
    )
    db.add(patient)
    db.commit()
    db.refresh(patient)
    return patient

def find_patient_by_email(db: Session, email: str) -> Optional[Patient]:
    return db.query(Patient).filter(Patient.email == normalize_email(email)).first()

def find_patient_by_id(db: Session, patient_id: int) -> Optional[Patient]:
    return db.query(Patient).filter(Patient.id == patient_id).first()

def verify_patient(db: Session, email: str) -> Optional[Patient]:
    """
    Mark the patient registered under ``email`` as verified.

    Returns:
        The updated patient, or None when no patient has that email
    """
    patient = find_patient_by_email(db, email)
    if not patient:
        return None

    patient.is_verified = True
    db.commit()
    db.refresh(patient)
    logger.info(f"Patient {patient.id} marked as verified")
    return patient
