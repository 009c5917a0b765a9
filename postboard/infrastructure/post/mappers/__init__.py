from .post_mapper import PostMapper

__all__ = ["PostMapper"]
