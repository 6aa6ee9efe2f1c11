"""
Pydantic models for todo items.

A todo is a title and a server‑assigned identifier.  Titles are
trimmed before the length check so that whitespace‑only input is
rejected.
"""

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Schema for creating a todo.

    Only ``title`` is accepted; any other field in the payload (for
    example a client supplied ``id``) is ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, examples=["Buy milk"])


class TodoRead(BaseModel):
    """Schema for a stored todo returned by the API."""

    id: str = Field(..., examples=["3f8c1a52-6a47-4c1e-9a0b-2f2b7c1d5e90"])
    title: str = Field(..., examples=["Buy milk"])

    model_config = {
        "from_attributes": True,
    }
