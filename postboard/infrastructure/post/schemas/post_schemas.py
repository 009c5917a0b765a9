"""Pydantic schemas for Post API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class PostBase(BaseModel):
    """Base schema for Post."""

    title: str = Field(..., description="Post title (3-255 characters)")
    content: str = Field(..., description="Post body (at least 10 characters)")


class PostCreateRequest(PostBase):
    """Schema for creating a new draft post."""


class PostUpdateRequest(PostBase):
    """Schema for replacing the title and content of a draft."""


class Post(PostBase):
    """Schema for Post response."""

    id: str
    status: str = Field(..., description="draft, published or archived")
    author_id: str
    created_at: datetime
    published_at: datetime | None = None

    model_config = {"from_attributes": True}


class PostsResponse(BaseModel):
    """Schema for list of posts response."""

    data: list[Post] = Field(..., description="List of posts")


class PostCreatedResponse(BaseModel):
    id: str
