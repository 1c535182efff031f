"""
OTP Schemas - Request bodies for the OTP endpoints.
"""
from pydantic import BaseModel

class SendOtpRequest(BaseModel):
    """
    Send OTP Schema - Used to (re)send a verification code

    Fields:
    - email: Registered email address
    """
    email: str

class VerifyOtpRequest(BaseModel):
    """
    Verify OTP Schema - Used to verify an email address

    Fields:
    - email: Registered email address
    - otp: Code received by email
    """
    email: str
    otp: str

class MessageResponse(BaseModel):
    message: str
