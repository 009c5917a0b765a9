"""Tag context schemas."""

from postboard.infrastructure.tag.schemas.tag_schemas import (
    Tag,
    TagCreatedResponse,
    TagCreateRequest,
    TagsResponse,
)

__all__ = ["Tag", "TagCreateRequest", "TagCreatedResponse", "TagsResponse"]
