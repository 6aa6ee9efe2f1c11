"""Body of 4xx/5xx responses sent by the todo endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Validation failed"])
    message: str = Field(..., examples=["Title cannot be empty"])
