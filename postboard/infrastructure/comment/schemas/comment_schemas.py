"""Pydantic schemas for Comment API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreateRequest(BaseModel):
    """Schema for commenting on a post."""

    content: str = Field(..., description="Comment text (3-1000 characters)")


class Comment(BaseModel):
    """Schema for Comment response."""

    id: str
    content: str
    post_id: str
    author_id: str
    created_at: datetime

    model_config = {"from_attributes": True}


class CommentsResponse(BaseModel):
    data: list[Comment] = Field(..., description="Comments, oldest first")


class CommentCreatedResponse(BaseModel):
    id: str
