"""
Email delivery for one-time passwords, built on FastAPI-Mail.
"""
import logging
from datetime import datetime
from functools import lru_cache
from fastapi_mail import FastMail, MessageSchema, ConnectionConfig, MessageType

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

def build_connection_config() -> ConnectionConfig:
    """Translate application settings into a FastAPI-Mail connection config."""
    return ConnectionConfig(
        MAIL_USERNAME=settings.mail_username,
        MAIL_PASSWORD=settings.mail_password,
        MAIL_FROM=settings.mail_from,
        MAIL_PORT=settings.mail_port,
        MAIL_SERVER=settings.mail_server,
        MAIL_STARTTLS=settings.mail_starttls,
        MAIL_SSL_TLS=settings.mail_ssl_tls,
        USE_CREDENTIALS=settings.use_credentials,
        VALIDATE_CERTS=settings.validate_certs,
        SUPPRESS_SEND=1 if settings.mail_suppress_send else 0
    )

def render_otp_email(code: str, expire_minutes: int) -> str:
    """
    Render the HTML body of a verification email.
    """
    return f"""
    <html>
        <head>
            <title>Patient Portal - Email Verification</title>
            <style>
                body {{ font-family: Arial, sans-serif; line-height: 1.6; }}
                .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
                .header {{ background-color: #4CAF50; color: white; padding: 10px; text-align: center; }}
                .content {{ padding: 20px; border: 1px solid #ddd; }}
                .code {{ font-size: 24px; font-weight: bold; text-align: center;
                        margin: 20px 0; padding: 10px; background-color: #f5f5f5; letter-spacing: 4px; }}
                .footer {{ text-align: center; margin-top: 20px; font-size: 12px; color: #777; }}
            </style>
        </head>
        <body>
            <div class="container">
                <div class="header">
                    <h1>Patient Portal</h1>
                </div>
                <div class="content">
                    <p>Hello,</p>
                    <p>Thank you for signing up. To verify your email address, please use the following one-time password:</p>
                    <div class="code">{code}</div>
                    <p>This code expires in {expire_minutes} minutes.</p>
                    <p>If you did not request this code, please ignore this email.</p>
                </div>
                <div class="footer">
                    &copy; {datetime.now().year} Patient Portal. All rights reserved.
                </div>
            </div>
        </body>
    </html>
    """

class EmailService:
    """
    Sends transactional email through a FastMail client.
    """
    def __init__(self, mailer: FastMail):
        self.mailer = mailer

    async def send_otp_email(self, email: str, code: str) -> None:
        """
        Send a verification code to ``email``.

        Raises:
            Exception: Whatever the mail transport raised
        """
        message = MessageSchema(
            subject="Patient Portal - Email Verification",
            recipients=[email],
            body=render_otp_email(code, settings.otp_expire_minutes),
            subtype=MessageType.html
        )
        await self.mailer.send_message(message)
        logger.info(f"Verification email dispatched to {email}")

@lru_cache()
def get_email_service() -> EmailService:
    """
    Email service dependency. Overridden in tests.
    """
    return EmailService(FastMail(build_connection_config()))
