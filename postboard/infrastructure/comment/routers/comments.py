import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from postboard.application.comment.commands import CreateCommentCommand
from postboard.application.comment.queries import ListCommentsQuery
from postboard.application.common.dispatcher import Dispatcher
from postboard.domain.common.exceptions import DomainError
from postboard.infrastructure.comment.schemas import (
    Comment,
    CommentCreatedResponse,
    CommentCreateRequest,
    CommentsResponse,
)
from postboard.infrastructure.common.dependencies import CurrentUserId
from postboard.infrastructure.common.di import get_dispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["comments"])


@router.post(
    "/{post_id}/comments",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    post_id: str,
    request: CommentCreateRequest,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CommentCreatedResponse:
    """
    Comment on a post as the acting user.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        comment_id = dispatcher.dispatch(
            CreateCommentCommand(
                content=request.content,
                post_id=post_id,
                author_id=current_user_id,
            )
        )
        return CommentCreatedResponse(id=comment_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create comment on post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{post_id}/comments",
    response_model=CommentsResponse,
    status_code=status.HTTP_200_OK,
)
def list_comments(
    post_id: str,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CommentsResponse:
    """List comments on a post, oldest first."""
    try:
        comments = dispatcher.dispatch(ListCommentsQuery(post_id=post_id))
        return CommentsResponse(data=[Comment.model_validate(comment) for comment in comments])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list comments for post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
