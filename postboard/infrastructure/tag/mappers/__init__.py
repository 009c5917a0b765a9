from .tag_mapper import TagMapper

__all__ = ["TagMapper"]
