"""
Patient account routes: signup, sign-in and profile.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..core.dependencies import get_current_patient
from .models import Patient
from .schemas import PatientSignup, PatientSignin, PatientResponse, SignupResponse, SigninResponse
from .service import sign_up_patient, sign_in_patient

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_200_OK, summary="Patient Signup")
async def signup_route(
    signup_data: PatientSignup,
    db: Session = Depends(get_db)
):
    """
    Patient self-registration endpoint.

    The account starts unverified; the client requests an OTP through
    ``/api/otp/send`` right after a successful signup.
    """
    patient = await sign_up_patient(db, signup_data)
    return {
        "success": True,
        "message": "Patient created successfully",
        "patient": patient
    }

@router.post("/signin", response_model=SigninResponse, status_code=status.HTTP_200_OK, summary="Patient Sign-in")
async def signin_route(
    signin_data: PatientSignin,
    db: Session = Depends(get_db)
):
    token = await sign_in_patient(db, signin_data.email, signin_data.password)
    return {"message": "Sign-in successful", "token": token}

@router.get("/me", response_model=PatientResponse, summary="Get Current Patient Profile")
async def me_route(current_patient: Patient = Depends(get_current_patient)):
    return current_patient
