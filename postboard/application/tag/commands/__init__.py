from .create_tag import CreateTagCommand, CreateTagHandler

__all__ = ["CreateTagCommand", "CreateTagHandler"]
