"""Pydantic schemas for identity store user documents and credentials."""

from pydantic import BaseModel, Field, field_validator
from typing import List


class UserCreate(BaseModel):
    """Registration payload"""

    user_id: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("user_id")
    @classmethod
    def handle_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class LoginRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    """Public view of a user document; never includes the password hash."""

    user_id: str
    recipes: List[int] = []
    reviews: List[int] = []
