"""Pydantic schemas for User API request/response validation."""

from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: str = Field(..., max_length=255, description="User's email address")
    password: str = Field(..., min_length=8, description="Plain text password")


class UserRegisteredResponse(BaseModel):
    id: str
