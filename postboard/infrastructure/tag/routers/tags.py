import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from postboard.application.common.dispatcher import Dispatcher
from postboard.application.tag.commands import CreateTagCommand
from postboard.application.tag.queries import ListTagsQuery
from postboard.domain.common.exceptions import DomainError
from postboard.infrastructure.common.dependencies import CurrentUserId
from postboard.infrastructure.common.di import get_dispatcher
from postboard.infrastructure.tag.schemas import (
    Tag,
    TagCreatedResponse,
    TagCreateRequest,
    TagsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=TagsResponse, status_code=status.HTTP_200_OK)
def list_tags(dispatcher: Dispatcher = Depends(get_dispatcher)) -> TagsResponse:
    """List all tags ordered by name."""
    try:
        tags = dispatcher.dispatch(ListTagsQuery())
        return TagsResponse(data=[Tag.model_validate(tag) for tag in tags])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list tags: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=TagCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_tag(
    request: TagCreateRequest,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TagCreatedResponse:
    """
    Create a tag.

    Raises:
        HTTPException: 400 if the input is invalid or the slug is taken
    """
    try:
        tag_id = dispatcher.dispatch(
            CreateTagCommand(name=request.name, color=request.color, slug=request.slug)
        )
        logger.info(f"User {current_user_id} created tag {tag_id}")
        return TagCreatedResponse(id=tag_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create tag: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
