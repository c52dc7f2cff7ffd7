import asyncio
import enum
import logging
from dataclasses import dataclass, field

from wordscope.config import settings
from wordscope.services.image_service import fetch_image_url
from wordscope.services.llm_service import fetch_dictionary_text
from wordscope.services.parser import parse_dictionary_response

logger = logging.getLogger(__name__)


class LookupMode(str, enum.Enum):
    FULL = "full"  # dictionary entry and image
    TEXT = "text"
    IMAGE = "image"


class UpstreamError(LookupError):
    """The text provider could not produce a dictionary entry."""


@dataclass
class LookupResult:
    word: str
    language: str
    mode: LookupMode
    raw_text: str | None = None
    entry: dict[str, str] = field(default_factory=dict)
    image_url: str | None = None


async def _fetch_text(word: str, language: str) -> str:
    try:
        return await fetch_dictionary_text(word, language)
    except Exception as e:
        raise UpstreamError(f"Text provider failed for {word!r}: {e}") from e


async def lookup_word(word: str, language: str, mode: LookupMode) -> LookupResult:
    wants_text = mode in (LookupMode.FULL, LookupMode.TEXT)
    wants_image = mode in (LookupMode.FULL, LookupMode.IMAGE)

    result = LookupResult(word=word, language=language, mode=mode)
    image_task = asyncio.create_task(fetch_image_url(word)) if wants_image else None
    if wants_text:
        try:
            raw_text = await _fetch_text(word, language)
        except UpstreamError:
            if image_task is not None:
                image_task.cancel()
            raise
        result.raw_text = raw_text
        result.entry = parse_dictionary_response(raw_text, language)
        if not result.entry:
            logger.warning("No recognized sections in entry for %r", word)

    if image_task is not None:
        image_url = await image_task
        result.image_url = image_url or settings.default_image_url
    return result
