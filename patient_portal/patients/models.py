"""
Patient Model - Stores patient account information.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from ..database import Base

class Patient(Base):
    """
    Patient Model - Stores patient account information

    Fields:
    - id: Primary key generated by the database
    - email: Unique email address used as the login key
    - password: Securely hashed password (never store raw passwords)
    - first_name: Patient's first name
    - last_name: Patient's last name
    - phone: Patient's mobile number
    - is_verified: Whether the email has been verified through OTP
    - created_at: When the patient was created
    - updated_at: When the patient was last updated
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, email={self.email}, verified={self.is_verified})>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
