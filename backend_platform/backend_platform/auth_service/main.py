"""
Backend Service - user registration and login
"""
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import uvicorn

from .config import Settings, get_settings
from .db import build_engine, build_session_factory, init_db
from .errors import register_exception_handlers
from .routes import auth
from .security import PasswordHasher, TokenIssuer
from .utils.event_logger import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the Backend Service app.

    Settings are read from the environment when not passed in, so a missing
    JWT_SECRET stops the process here, before anything listens.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

        engine = build_engine(settings.DATABASE_URL)
        init_db(engine)

        app.state.settings = settings
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
        app.state.token_issuer = TokenIssuer(
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )
        logger.info("Backend Service started (email_case_sensitive=%s)", settings.EMAIL_CASE_SENSITIVE)
        yield
        engine.dispose()

    app = FastAPI(
        title="Backend Service",
        description="User registration and login",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(auth.router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Backend Service: FastAPI/SQLAlchemy (placeholder)"

    @app.get("/test")
    def test_endpoint():
        return {"message": "Backend /test endpoint is working!"}

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
