"""
Text processing endpoint
"""
from fastapi import APIRouter, Body, Request, status
from fastapi.responses import JSONResponse
from typing import Any
import logging

from ..schemas import ProcessResponse, ErrorResponse

logger = logging.getLogger(__name__)

INPUT_REQUIRED_MESSAGE = "inputText is required"
PROCESSING_FAILED_MESSAGE = "Failed to process request"

router = APIRouter(tags=["Processing"])


@router.post(
    "/process",
    response_model=ProcessResponse,
    responses={
        400: {"description": "inputText missing or not a string", "model": ErrorResponse},
        500: {"description": "Processing failed", "model": ErrorResponse}
    },
    summary="Process free text"
)
def process(request: Request, payload: Any = Body(None)):
    input_text = payload.get("inputText") if isinstance(payload, dict) else None
    if not input_text or not isinstance(input_text, str):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": INPUT_REQUIRED_MESSAGE}
        )

    try:
        message = request.app.state.processor.process(input_text)
    except Exception:
        logger.exception("Error processing request")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": PROCESSING_FAILED_MESSAGE}
        )

    return ProcessResponse(status="success", message=message)
