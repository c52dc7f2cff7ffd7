from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wordscope.config import settings
from wordscope.models.base import utcnow
from wordscope.models.history import SearchHistory


async def record_search(db: AsyncSession, word: str, language: str) -> SearchHistory:
    """Add a search to the history, moving repeated searches to the front."""
    result = await db.execute(
        select(SearchHistory).where(
            func.lower(SearchHistory.word) == word.lower(),
            SearchHistory.language == language,
        )
    )
    item = result.scalars().first()
    if item:
        item.word = word
        item.updated_at = utcnow()
    else:
        item = SearchHistory(word=word, language=language)
    db.add(item)
    await db.flush()

    # Keep only the newest entries
    stale = await db.execute(
        select(SearchHistory.id)
        .order_by(SearchHistory.updated_at.desc())
        .offset(settings.history_limit)
    )
    stale_ids = list(stale.scalars().all())
    if stale_ids:
        await db.execute(delete(SearchHistory).where(SearchHistory.id.in_(stale_ids)))

    await db.commit()
    await db.refresh(item)
    return item


async def list_history(db: AsyncSession, limit: int | None = None) -> list[SearchHistory]:
    result = await db.execute(
        select(SearchHistory)
        .order_by(SearchHistory.updated_at.desc())
        .limit(limit or settings.history_limit)
    )
    return list(result.scalars().all())


async def clear_history(db: AsyncSession) -> None:
    await db.execute(delete(SearchHistory))
    await db.commit()
