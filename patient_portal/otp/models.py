"""
OTP Model - Stores the outstanding verification code for an email address.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from ..database import Base

class OtpCode(Base):
    """
    OTP Model - One outstanding verification code per email

    Fields:
    - id: Primary key
    - email: Address the code was sent to (unique, a resend replaces the code)
    - code: Numeric one-time password
    - expires_at: Moment after which the code is rejected
    - created_at: When the code was issued
    """
    __tablename__ = "otp_codes"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    code = Column(String, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<OtpCode(email={self.email}, expires_at={self.expires_at})>"
