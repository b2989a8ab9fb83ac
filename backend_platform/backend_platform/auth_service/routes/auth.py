"""
Register and login endpoints.
"""
import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import AuthServiceError, AuthenticationError, ConflictError, InternalError
from ..schemas import LoginResponse, MessageResponse, UserPublic
from ..service import AuthService
from ..store import SqlAlchemyUserStore
from ..utils.event_logger import log_auth_event
from ..validators import validate_credentials, validate_password_strength

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"description": "Missing, non-string or weak credentials", "model": MessageResponse},
    500: {"description": "Unexpected failure", "model": MessageResponse},
}


def get_auth_service(request: Request, db: Session = Depends(get_db)) -> AuthService:
    state = request.app.state
    return AuthService(
        store=SqlAlchemyUserStore(db),
        hasher=state.password_hasher,
        token_issuer=state.token_issuer,
        email_case_sensitive=state.settings.EMAIL_CASE_SENSITIVE
    )


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, 409: {"description": "Email already registered", "model": MessageResponse}}
)
def register(
    request: Request,
    payload: Any = Body(None),
    service: AuthService = Depends(get_auth_service)
):
    credentials = validate_credentials(payload)
    validate_password_strength(credentials.password)

    try:
        user = service.register(credentials.email, credentials.password)
    except ConflictError:
        log_auth_event("register_conflict", credentials.email, request)
        raise
    except AuthServiceError:
        raise
    except Exception as e:
        logger.exception("Error during registration for email=%s", credentials.email)
        raise InternalError() from e

    log_auth_event("register_success", user.email, request, user_id=user.id)
    return user


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={**ERROR_RESPONSES, 401: {"description": "Invalid email or password", "model": MessageResponse}}
)
def login(
    request: Request,
    payload: Any = Body(None),
    service: AuthService = Depends(get_auth_service)
):
    # Login checks presence and type only, not password strength
    credentials = validate_credentials(payload)

    try:
        result = service.login(credentials.email, credentials.password)
    except AuthenticationError:
        log_auth_event("login_failure", credentials.email, request)
        raise
    except AuthServiceError:
        raise
    except Exception as e:
        logger.exception("Error during login for email=%s", credentials.email)
        raise InternalError() from e

    log_auth_event("login_success", result.user.email, request, user_id=result.user.id)
    return result
