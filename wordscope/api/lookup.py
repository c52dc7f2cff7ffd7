import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wordscope.config import settings
from wordscope.database import get_db
from wordscope.schemas.lookup import LookupResponse
from wordscope.services.history_service import record_search
from wordscope.services.lookup_service import LookupMode, UpstreamError, lookup_word
from wordscope.services.presentation import render_entry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lookup", tags=["lookup"])


@router.get("", response_model=LookupResponse)
async def lookup(
    word: str = "",
    language: str | None = None,
    mode: LookupMode = LookupMode.FULL,
    db: AsyncSession = Depends(get_db),
):
    """Look up a word: parsed dictionary sections plus an illustrative image."""
    word = word.strip()
    if not word:
        raise HTTPException(status_code=400, detail="Word parameter is required.")
    language = (language or "").strip() or settings.default_language

    try:
        result = await lookup_word(word, language, mode)
    except UpstreamError:
        logger.exception("Dictionary lookup failed")
        raise HTTPException(status_code=502, detail="Failed to fetch data from APIs.")

    if mode != LookupMode.IMAGE:
        try:
            await record_search(db, word, language)
        except SQLAlchemyError:
            logger.exception("Could not record search history")
            # Non-fatal, the entry is still returned
            await db.rollback()

    rendered = render_entry(
        word,
        result.entry,
        language,
        result.image_url,
        default_image_url=settings.default_image_url,
    )
    return LookupResponse(
        **rendered.model_dump(),
        mode=mode.value,
        raw_text=result.raw_text,
        entry=result.entry,
    )
