"""
Tests for the patient repository and service layer.
"""
import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from patient_portal.core.security import hash_password
from patient_portal.exceptions import EmailAlreadyExistsException
from patient_portal.patients import repository
from patient_portal.patients.models import Patient
from patient_portal.patients.schemas import PatientSignup
from patient_portal.patients.service import sign_up_patient


def create(db, email="asha@example.com"):
    return repository.create_patient(
        db,
        email=email,
        password_hash=hash_password("Secret@123"),
        first_name="Asha",
        last_name="Verma",
        phone="9876543210",
    )


def test_create_and_find_patient(db):
    patient = create(db, email=" Asha@Example.com ")

    assert patient.id is not None
    assert patient.email == "asha@example.com"
    assert repository.find_patient_by_email(db, "ASHA@example.com").id == patient.id
    assert repository.find_patient_by_id(db, patient.id).email == "asha@example.com"
    assert repository.find_patient_by_email(db, "other@example.com") is None


def test_unique_index_rejects_duplicate_email(db):
    create(db)

    with pytest.raises(IntegrityError):
        create(db)
    db.rollback()


def test_verify_patient_flips_flag(db):
    create(db)

    patient = repository.verify_patient(db, "asha@example.com")

    assert patient.is_verified is True
    assert repository.verify_patient(db, "ghost@example.com") is None


def test_sign_up_reports_duplicate_when_insert_races(db, monkeypatch):
    # Another request inserts the same email between the lookup and the insert
    create(db)
    monkeypatch.setattr(repository, "find_patient_by_email", lambda db, email: None)

    signup = PatientSignup(
        firstName="Asha",
        lastName="Verma",
        email="asha@example.com",
        phone="9876543210",
        password="Secret@123",
    )
    with pytest.raises(EmailAlreadyExistsException):
        asyncio.run(sign_up_patient(db, signup))

    assert db.query(Patient).count() == 1
