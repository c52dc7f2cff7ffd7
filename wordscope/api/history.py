from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wordscope.database import get_db
from wordscope.schemas.history import HistoryItem
from wordscope.services.history_service import clear_history, list_history

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=list[HistoryItem])
async def get_history(
    limit: int | None = Query(default=None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await list_history(db, limit)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_history(db: AsyncSession = Depends(get_db)):
    await clear_history(db)
