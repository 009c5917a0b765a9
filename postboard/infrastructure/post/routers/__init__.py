from .posts import router

__all__ = ["router"]
