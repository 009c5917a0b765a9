from .create_comment import CreateCommentCommand, CreateCommentHandler

__all__ = ["CreateCommentCommand", "CreateCommentHandler"]
