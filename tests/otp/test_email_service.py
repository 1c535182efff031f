"""
Tests for OTP generation and the FastAPI-Mail backed email service.
"""
import asyncio
from email.utils import parseaddr

from fastapi_mail import FastMail

from patient_portal.otp.email import EmailService, build_connection_config, render_otp_email
from patient_portal.otp.service import generate_otp


def test_generate_otp_default_length():
    code = generate_otp()

    assert len(code) == 6
    assert code.isdigit()


def test_generate_otp_custom_length():
    assert len(generate_otp(8)) == 8


def test_render_otp_email_contains_code_and_expiry():
    body = render_otp_email("482913", 10)

    assert "482913" in body
    assert "10 minutes" in body


def test_send_otp_email_builds_message():
    mailer = FastMail(build_connection_config())
    service = EmailService(mailer)

    async def send():
        with mailer.record_messages() as outbox:
            await service.send_otp_email("asha@example.com", "482913")
            return outbox

    outbox = asyncio.run(send())

    assert len(outbox) == 1
    assert parseaddr(outbox[0]["To"])[1] == "asha@example.com"
    assert outbox[0]["Subject"] == "Patient Portal - Email Verification"
