"""
Global exception handlers and custom exception classes.

Every error leaves the API as a JSON body of the form ``{"error": "..."}``.
"""
from typing import Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging

# Set up logging
logger = logging.getLogger(__name__)

class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    def __init__(self, status_code: int, error: str):
        super().__init__(error)
        self.status_code = status_code
        self.error = error

    def to_content(self) -> Dict:
        return {"error": self.error}


class SignupValidationException(AppException):
    """Exception raised when signup fields fail format checks."""
    def __init__(self, errors: Dict[str, str]):
        # Surface the first field message as the headline error
        first_message = next(iter(errors.values()), "Invalid signup data")
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=first_message)
        self.errors = errors

    def to_content(self) -> Dict:
        return {"error": self.error, "errors": self.errors}


class EmailAlreadyExistsException(AppException):
    """Exception raised when email already exists."""
    def __init__(self, error: str = "User already exists with this email"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=error)


class PatientNotFoundException(AppException):
    """Exception raised when no patient is registered under an email."""
    def __init__(self, error: str = "User not found"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=error)


class InvalidCredentialsException(AppException):
    """Exception raised when credentials are invalid."""
    def __init__(self, error: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=error)


class InvalidOtpException(AppException):
    """Exception raised when an OTP does not match or has expired."""
    def __init__(self, error: str = "Invalid OTP"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=error)


class AlreadyVerifiedException(AppException):
    """Exception raised when requesting an OTP for a verified account."""
    def __init__(self, error: str = "Email already verified"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, error=error)


class EmailDeliveryException(AppException):
    """Exception raised when the mail transport fails."""
    def __init__(self, error: str = "Failed to send OTP"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error=error)


class InvalidTokenException(AppException):
    """Exception raised when a bearer token is missing, invalid or expired."""
    def __init__(self, error: str = "Invalid or expired token"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, error=error)


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    logger.warning(f"Application error on {request.url.path}: {exc.error}")
    headers: Optional[Dict[str, str]] = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Malformed bodies are client errors, reported as 400 like every other
    rejected input.
    """
    errors = exc.errors()
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    message = "Invalid request body"
    if errors and errors[0].get("type") != "json_invalid":
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg", message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message}
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all so unexpected failures still answer with a JSON error body."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"}
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
