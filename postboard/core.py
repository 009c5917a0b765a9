from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from postboard.application.comment.commands import CreateCommentCommand, CreateCommentHandler
from postboard.application.comment.queries import ListCommentsHandler, ListCommentsQuery
from postboard.application.common.dispatcher import Dispatcher
from postboard.application.post.commands import (
    ArchivePostCommand,
    ArchivePostHandler,
    CreatePostCommand,
    CreatePostHandler,
    DeletePostCommand,
    DeletePostHandler,
    PublishPostCommand,
    PublishPostHandler,
    UpdatePostContentCommand,
    UpdatePostContentHandler,
)
from postboard.application.post.queries import (
    GetPostHandler,
    GetPostQuery,
    ListPostsHandler,
    ListPostsQuery,
)
from postboard.application.tag.commands import CreateTagCommand, CreateTagHandler
from postboard.application.tag.queries import ListTagsHandler, ListTagsQuery
from postboard.application.user.commands import (
    PromoteUserToAdminCommand,
    PromoteUserToAdminHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from postboard.config import get_settings
from postboard.infrastructure.comment.repositories import CommentRepository
from postboard.infrastructure.post.repositories import PostRepository
from postboard.infrastructure.tag.repositories import TagRepository
from postboard.infrastructure.user.repositories import UserRepository
from postboard.infrastructure.user.services import PasswordHasher


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    post_repository = providers.Factory(PostRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)
    comment_repository = providers.Factory(CommentRepository, db=db)
    tag_repository = providers.Factory(TagRepository, db=db)

    # Services
    password_hasher = providers.Singleton(
        PasswordHasher, pepper=settings.provided.PASSWORD_PEPPER
    )

    # Post handlers
    create_post_handler = providers.Factory(CreatePostHandler, post_repository=post_repository)
    publish_post_handler = providers.Factory(PublishPostHandler, post_repository=post_repository)
    archive_post_handler = providers.Factory(ArchivePostHandler, post_repository=post_repository)
    update_post_content_handler = providers.Factory(
        UpdatePostContentHandler, post_repository=post_repository
    )
    delete_post_handler = providers.Factory(DeletePostHandler, post_repository=post_repository)
    get_post_handler = providers.Factory(GetPostHandler, post_repository=post_repository)
    list_posts_handler = providers.Factory(ListPostsHandler, post_repository=post_repository)

    # User handlers
    register_user_handler = providers.Factory(
        RegisterUserHandler,
        user_repository=user_repository,
        password_hasher=password_hasher,
    )
    promote_user_to_admin_handler = providers.Factory(
        PromoteUserToAdminHandler, user_repository=user_repository
    )

    # Comment handlers
    create_comment_handler = providers.Factory(
        CreateCommentHandler,
        comment_repository=comment_repository,
        post_repository=post_repository,
    )
    list_comments_handler = providers.Factory(
        ListCommentsHandler, comment_repository=comment_repository
    )

    # Tag handlers
    create_tag_handler = providers.Factory(CreateTagHandler, tag_repository=tag_repository)
    list_tags_handler = providers.Factory(ListTagsHandler, tag_repository=tag_repository)

    # One handler per request type
    dispatcher = providers.Factory(
        Dispatcher,
        handlers=providers.Dict(
            {
                CreatePostCommand: create_post_handler,
                PublishPostCommand: publish_post_handler,
                ArchivePostCommand: archive_post_handler,
                UpdatePostContentCommand: update_post_content_handler,
                DeletePostCommand: delete_post_handler,
                GetPostQuery: get_post_handler,
                ListPostsQuery: list_posts_handler,
                RegisterUserCommand: register_user_handler,
                PromoteUserToAdminCommand: promote_user_to_admin_handler,
                CreateCommentCommand: create_comment_handler,
                ListCommentsQuery: list_comments_handler,
                CreateTagCommand: create_tag_handler,
                ListTagsQuery: list_tags_handler,
            }
        ),
    )


# Every request type the application accepts; checked against the dispatcher at startup
REQUEST_TYPES = (
    CreatePostCommand,
    PublishPostCommand,
    ArchivePostCommand,
    UpdatePostContentCommand,
    DeletePostCommand,
    GetPostQuery,
    ListPostsQuery,
    RegisterUserCommand,
    PromoteUserToAdminCommand,
    CreateCommentCommand,
    ListCommentsQuery,
    CreateTagCommand,
    ListTagsQuery,
)

# Initialize container
container = Container()
