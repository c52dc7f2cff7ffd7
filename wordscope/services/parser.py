"""Extract labeled sections from free-text dictionary entries.

The text provider is asked to label each section with a bolded header
(``**Definitions:**``) but nothing enforces it, so sections may be
missing, reordered or preceded by unlabeled text. Parsing never raises;
unrecognized structure degrades to a partial or empty mapping.
"""

import re
from functools import lru_cache

SECTION_KEYS = (
    "pronunciation",
    "definitions",
    "synonyms",
    "antonyms",
    "etymology",
    "exampleSentences",
    "languageMeaning",
)

TRANSLATION_KEY = "languageMeaning"

_FIXED_LABELS = {
    "Pronunciation": "pronunciation",
    "Definitions": "definitions",
    "Synonyms": "synonyms",
    "Antonyms": "antonyms",
    "Etymology": "etymology",
    "Example Sentences": "exampleSentences",
}

# A heading or list marker in front of a header belongs to the header,
# otherwise it would end up as trailing noise in the previous section.
_HEADER_PREFIX = r"(?:^[ \t]*(?:#{1,6}[ \t]*|(?:[-*•]|\d+\.)[ \t]+))?"
# "**Label:**" and the "**Label**:" variant
_HEADER_CLOSE = r"[ \t]*(?::[ \t]*\*\*|\*\*[ \t]*:)"

_LIST_MARKER = re.compile(r"^\s*(?:[*\-•]|\d+[.)])(?:\s+|$)")


def _label_pattern(label: str) -> str:
    return r"\s+".join(re.escape(part) for part in label.split())


@lru_cache(maxsize=64)
def _header_pattern(translation_label: str) -> re.Pattern[str]:
    labels = dict(_FIXED_LABELS)
    if translation_label:
        labels[f"{translation_label} Meaning"] = TRANSLATION_KEY

    # One named group per section key; the match reports its key via lastgroup
    alternatives = "|".join(
        f"(?P<{key}>{_label_pattern(label)})" for label, key in labels.items()
    )
    return re.compile(
        _HEADER_PREFIX + r"\*\*[ \t]*(?:" + alternatives + ")" + _HEADER_CLOSE,
        re.IGNORECASE | re.MULTILINE,
    )


def parse_dictionary_response(
    text: str | None, translation_label: str
) -> dict[str, str]:
    """Split a dictionary entry into its sections.

    ``translation_label`` is the name of the requested language; its
    ``<label> Meaning`` header is reported under ``languageMeaning``.
    Sections missing from ``text`` are missing from the result. When no
    pronunciation header exists, unlabeled text before the first header
    is taken as the pronunciation.
    """
    if not text or not isinstance(text, str):
        return {}

    pattern = _header_pattern((translation_label or "").strip())
    matches = list(pattern.finditer(text))
    if not matches:
        return {}

    sections: dict[str, str] = {}
    seen: set[str] = set()
    for current, following in zip(matches, matches[1:] + [None]):
        end = following.start() if following else len(text)
        key = current.lastgroup
        seen.add(key)
        content = text[current.end():end].strip()
        # first non-empty occurrence wins
        if content and key not in sections:
            sections[key] = content

    if "pronunciation" not in seen:
        leading = text[: matches[0].start()].strip()
        if leading:
            sections["pronunciation"] = leading

    return {key: sections[key] for key in SECTION_KEYS if key in sections}


def strip_list_marker(line: str) -> str:
    """Drop a leading ``*``, ``-``, ``•`` or ``1.`` marker from one line."""
    return _LIST_MARKER.sub("", line, count=1).strip()
