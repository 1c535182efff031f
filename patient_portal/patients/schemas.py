"""
Patient Schemas - Pydantic models for request parsing and response serialization.

Field names follow the frontend's camelCase JSON through aliases.
"""
from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

class PatientSignup(BaseModel):
    """
    Patient Signup Schema - Body of POST /api/patients/signup

    Fields default to empty strings so that missing values are reported by
    the signup validation rules ("... is required!") rather than by pydantic.
    """
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone: str = ""
    password: str = ""

    class Config:
        populate_by_name = True

class PatientSignin(BaseModel):
    """
    Patient Signin Schema - Body of POST /api/patients/signin
    """
    email: str = ""
    password: str = ""

class PatientResponse(BaseModel):
    """
    Patient Response Schema - Public view of a patient, never includes the password hash
    """
    id: int
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    phone: str
    is_verified: bool = Field(alias="isVerified")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
        populate_by_name = True

class SignupResponse(BaseModel):
    success: bool = True
    message: str
    patient: PatientResponse

class SigninResponse(BaseModel):
    message: str
    token: str
