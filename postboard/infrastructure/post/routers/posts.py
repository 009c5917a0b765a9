import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from postboard.application.common.dispatcher import Dispatcher
from postboard.application.post.commands import (
    ArchivePostCommand,
    CreatePostCommand,
    DeletePostCommand,
    PublishPostCommand,
    UpdatePostContentCommand,
)
from postboard.application.post.dtos import PostDTO
from postboard.application.post.queries import GetPostQuery, ListPostsQuery
from postboard.domain.common.exceptions import DomainError
from postboard.domain.post.exceptions import PostNotFoundError
from postboard.infrastructure.common.dependencies import CurrentUserId
from postboard.infrastructure.common.di import get_dispatcher
from postboard.infrastructure.post.schemas import (
    Post,
    PostCreatedResponse,
    PostCreateRequest,
    PostsResponse,
    PostUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


def _get_authored_post(dispatcher: Dispatcher, post_id: str, user_id: str) -> PostDTO:
    """
    Load a post and check that the acting user wrote it.

    Raises:
        PostNotFoundError: If the post does not exist
        HTTPException: 403 if the post belongs to someone else
    """
    post = dispatcher.dispatch(GetPostQuery(post_id=post_id))
    if post is None:
        raise PostNotFoundError(post_id)
    if post.author_id != user_id.lower():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the author can modify this post",
        )
    return post


def _reload(dispatcher: Dispatcher, post_id: str) -> Post:
    post = dispatcher.dispatch(GetPostQuery(post_id=post_id))
    return Post.model_validate(post)


@router.get("", response_model=PostsResponse, status_code=status.HTTP_200_OK)
def list_posts(
    only_published: bool = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PostsResponse:
    """
    List posts.

    Args:
        only_published: Return only published posts, most recently published first

    Returns:
        PostsResponse with posts newest first
    """
    try:
        posts = dispatcher.dispatch(ListPostsQuery(only_published=only_published))
        return PostsResponse(data=[Post.model_validate(post) for post in posts])
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to list posts: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{post_id}", response_model=Post, status_code=status.HTTP_200_OK)
def get_post(
    post_id: str,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Post:
    """
    Get a single post.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        post = dispatcher.dispatch(GetPostQuery(post_id=post_id))
        if post is None:
            raise PostNotFoundError(post_id)
        return Post.model_validate(post)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to get post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    request: PostCreateRequest,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PostCreatedResponse:
    """
    Create a draft post authored by the acting user.

    Returns:
        The new post's id
    """
    try:
        post_id = dispatcher.dispatch(
            CreatePostCommand(
                title=request.title,
                content=request.content,
                author_id=current_user_id,
            )
        )
        return PostCreatedResponse(id=post_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create post: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{post_id}", response_model=Post, status_code=status.HTTP_200_OK)
def update_post(
    post_id: str,
    request: PostUpdateRequest,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Post:
    """Replace the title and content of a draft post."""
    try:
        _get_authored_post(dispatcher, post_id, current_user_id)
        dispatcher.dispatch(
            UpdatePostContentCommand(post_id=post_id, title=request.title, content=request.content)
        )
        return _reload(dispatcher, post_id)
    except (DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to update post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{post_id}/publish", response_model=Post, status_code=status.HTTP_200_OK)
def publish_post(
    post_id: str,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Post:
    """Publish a draft post."""
    try:
        _get_authored_post(dispatcher, post_id, current_user_id)
        dispatcher.dispatch(PublishPostCommand(post_id=post_id))
        return _reload(dispatcher, post_id)
    except (DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to publish post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{post_id}/archive", response_model=Post, status_code=status.HTTP_200_OK)
def archive_post(
    post_id: str,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Post:
    """Archive a published post."""
    try:
        _get_authored_post(dispatcher, post_id, current_user_id)
        dispatcher.dispatch(ArchivePostCommand(post_id=post_id))
        return _reload(dispatcher, post_id)
    except (DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to archive post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    current_user_id: CurrentUserId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> None:
    """Delete a post. Its author and their other content are not affected."""
    try:
        _get_authored_post(dispatcher, post_id, current_user_id)
        dispatcher.dispatch(DeletePostCommand(post_id=post_id))
    except (DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to delete post {post_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
