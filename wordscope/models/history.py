from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from wordscope.models.base import Base, TimestampMixin, generate_uuid


class SearchHistory(Base, TimestampMixin):
    __tablename__ = "search_history"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    word: Mapped[str] = mapped_column(String(200), index=True)
    language: Mapped[str] = mapped_column(String(50))
