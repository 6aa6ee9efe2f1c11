"""
Pydantic models for user data.

Users are part of the data model and the storage interface but no
route exposes them yet.  Passwords are kept as given; hash them
before wiring user creation into any real interface.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user.

    Both fields must be present strings.  Emptiness is not checked.
    """

    username: str = Field(..., examples=["alice"])
    password: str = Field(..., examples=["strongpassword"])


class UserRead(UserCreate):
    """Schema for a stored user."""

    id: str

    model_config = {
        "from_attributes": True,
    }
