"""
Agent Service - placeholder LLM processing endpoint
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import uvicorn

from .config import Settings
from .processor import PlaceholderProcessor
from .routes import health, process

logger = logging.getLogger(__name__)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed request body: path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": process.INPUT_REQUIRED_MESSAGE}
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(
            level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            force=True
        )
        app.state.settings = settings
        app.state.processor = PlaceholderProcessor(settings.RESPONSE_TEMPLATE)
        logger.info("Agent Service started")
        yield

    app = FastAPI(
        title="Agent Service",
        description="Placeholder text processing service",
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

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(process.router)
    app.include_router(health.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint"""
        return "Agent Service: FastAPI/LangChain (placeholder)"

    return app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
