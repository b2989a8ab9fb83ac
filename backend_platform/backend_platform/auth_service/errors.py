"""
Error taxonomy for the auth flow and its mapping to HTTP responses.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED_MESSAGE = "Email and password are required and must be strings."
WEAK_PASSWORD_MESSAGE = (
    "Password must be at least 8 characters long and include at least one "
    "alphabetical character, one number, and one special symbol."
)
USER_EXISTS_MESSAGE = "User already exists with this email."
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class AuthServiceError(Exception):
    error_code: str = "INTERNAL_ERROR"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(AuthServiceError):
    """Malformed, missing or weak input. Raised before the store is touched."""
    error_code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AuthServiceError):
    error_code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = USER_EXISTS_MESSAGE):
        super().__init__(message)


class AuthenticationError(AuthServiceError):
    """Unknown email and wrong password share this error and its message."""
    error_code = "AUTHENTICATION_ERROR"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message)


class InternalError(AuthServiceError):
    error_code = "INTERNAL_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)


async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    logger.warning(
        "Request failed: path=%s error_code=%s status=%s",
        request.url.path, exc.error_code, exc.status_code
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparsable bodies get the same answer as missing credentials
    logger.warning("Malformed request body: path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": CREDENTIALS_REQUIRED_MESSAGE}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthServiceError, auth_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
