from typing import Literal

from pydantic import BaseModel


class FormattedSection(BaseModel):
    key: str
    title: str
    kind: Literal["list", "paragraph"]
    text: str | None = None
    items: list[str] = []
    missing: bool = False


class RenderedEntry(BaseModel):
    word: str
    language: str
    sections: list[FormattedSection]
    image_url: str | None = None
    show_image: bool = False


class LookupResponse(RenderedEntry):
    mode: str
    raw_text: str | None = None
    entry: dict[str, str] = {}
