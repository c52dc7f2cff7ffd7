from wordscope.models.base import Base
from wordscope.models.history import SearchHistory

__all__ = ["Base", "SearchHistory"]
