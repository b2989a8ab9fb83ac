"""
Logging setup and auth event logging.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import Request
import sys
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s:%(message)s"
LOG_FILE_NAME = "auth_events.log"

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register_success",
    "register_conflict",
    "login_success",
    "login_failure",
}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Send logs to stdout and, when log_dir is given, to <log_dir>/auth_events.log.

    A log directory that cannot be created only costs the file handler.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME)))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def client_ip(request: Request) -> Optional[str]:
    ip_address = None
    if request.client:
        ip_address = request.client.host

    # Proxy/load balancer scenarios; X-Forwarded-For may list several hops
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()

    return ip_address


def log_auth_event(
    event_type: str,
    email: str,
    request: Request,
    user_id: Optional[str] = None
) -> None:
    """
    Log an authentication event. Never receives passwords or tokens.

    Args:
        event_type: One of: register_success, register_conflict,
                    login_success, login_failure
        email: Email the request was made for
        request: FastAPI Request object
        user_id: Id of the user, when one is known

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    level = logging.WARNING if event_type in ("register_conflict", "login_failure") else logging.INFO
    logger.log(
        level,
        "AUTH %s user_id=%s email=%s ip=%s user_agent=%s timestamp=%s",
        event_type, user_id, email, client_ip(request),
        request.headers.get("user-agent"), datetime.now(timezone.utc).isoformat()
    )
