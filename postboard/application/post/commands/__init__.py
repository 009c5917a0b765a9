from .archive_post import ArchivePostCommand, ArchivePostHandler
from .create_post import CreatePostCommand, CreatePostHandler
from .delete_post import DeletePostCommand, DeletePostHandler
from .publish_post import PublishPostCommand, PublishPostHandler
from .update_post_content import UpdatePostContentCommand, UpdatePostContentHandler

__all__ = [
    "ArchivePostCommand",
    "ArchivePostHandler",
    "CreatePostCommand",
    "CreatePostHandler",
    "DeletePostCommand",
    "DeletePostHandler",
    "PublishPostCommand",
    "PublishPostHandler",
    "UpdatePostContentCommand",
    "UpdatePostContentHandler",
]
