"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string
        secret_key: Secret key for JWT token encoding
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Access token expiration time in minutes

        # OTP settings
        otp_length: Number of digits in a verification code
        otp_expire_minutes: Lifetime of a verification code in minutes

        # Email settings
        mail_username: SMTP server username
        mail_password: SMTP server password
        mail_from: Sender email address
        mail_port: SMTP server port
        mail_server: SMTP server hostname
        mail_starttls: Whether to use STARTTLS
        mail_ssl_tls: Whether to use SSL/TLS
        use_credentials: Whether to use credentials for SMTP
        validate_certs: Whether to validate certificates
        mail_suppress_send: Build messages without delivering them

        # Frontend settings
        cors_origins: Origins allowed to call the API with credentials
    """
    # Database settings
    database_url: str = "sqlite:///./patient_portal.db"

    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # OTP settings
    otp_length: int = 6
    otp_expire_minutes: int = 10

    # Email settings
    mail_username: str = ""
    mail_password: str = ""
    mail_from: str = "noreply@patientportal.com"
    mail_port: int = 587
    mail_server: str = "localhost"
    mail_starttls: bool = True
    mail_ssl_tls: bool = False
    use_credentials: bool = True
    validate_certs: bool = True
    mail_suppress_send: bool = False

    # Frontend settings
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

# Create settings instance
settings = Settings()
