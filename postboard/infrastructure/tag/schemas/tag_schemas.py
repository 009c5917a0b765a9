"""Pydantic schemas for Tag API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class TagCreateRequest(BaseModel):
    """Schema for creating a new tag."""

    name: str = Field(..., description="Tag name")
    color: str = Field(..., description="Hex color, e.g. #3B82F6")
    slug: str | None = Field(None, description="URL slug; derived from the name when omitted")


class Tag(BaseModel):
    """Schema for Tag response."""

    id: str
    name: str
    slug: str
    color: str
    created_at: datetime

    model_config = {"from_attributes": True}


class TagsResponse(BaseModel):
    data: list[Tag] = Field(..., description="Tags ordered by name")


class TagCreatedResponse(BaseModel):
    id: str
