"""Turn parsed dictionary sections into render-ready data."""

from wordscope.schemas.lookup import FormattedSection, RenderedEntry
from wordscope.services.parser import SECTION_KEYS, TRANSLATION_KEY, strip_list_marker

PLACEHOLDER = "N/A"

_TITLES = {
    "pronunciation": "Pronunciation",
    "definitions": "Definitions",
    "synonyms": "Synonyms",
    "antonyms": "Antonyms",
    "etymology": "Etymology",
    "exampleSentences": "Example Sentences",
}


def _clean(text: str) -> str:
    return text.replace("**", "").strip()


def section_title(key: str, language: str) -> str:
    if key == TRANSLATION_KEY:
        return f"{language} Meaning"
    return _TITLES.get(key, key)


def format_section(content: str | None, key: str = "", title: str = "") -> FormattedSection:
    """Render multi-line content as a list and anything else as a paragraph."""
    lines = [line for line in (content or "").splitlines() if line.strip()]
    if not lines:
        return FormattedSection(
            key=key, title=title, kind="paragraph", text=PLACEHOLDER, missing=True
        )
    if len(lines) == 1:
        return FormattedSection(
            key=key, title=title, kind="paragraph", text=_clean(lines[0])
        )
    items = [_clean(strip_list_marker(line)) for line in lines]
    return FormattedSection(
        key=key, title=title, kind="list", items=[item for item in items if item]
    )


def render_entry(
    word: str,
    entry: dict[str, str],
    language: str,
    image_url: str | None,
    default_image_url: str | None = None,
) -> RenderedEntry:
    sections = [
        format_section(entry.get(key), key=key, title=section_title(key, language))
        for key in SECTION_KEYS
    ]
    show_image = bool(image_url) and image_url != default_image_url
    return RenderedEntry(
        word=word,
        language=language,
        sections=sections,
        image_url=image_url,
        show_image=show_image,
    )
