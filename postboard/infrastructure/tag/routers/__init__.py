from .tags import router

__all__ = ["router"]
