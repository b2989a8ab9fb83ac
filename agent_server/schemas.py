"""
Pydantic schemas for Agent Service responses
"""
from pydantic import BaseModel, Field


class ProcessResponse(BaseModel):
    status: str = Field(..., description="Always 'success' on a 200 response")
    message: str = Field(..., description="Processed text")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "success",
                    "message": 'Processed: "hello" by LangChain (simulated)'
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    error: str
