from datetime import datetime

from pydantic import BaseModel


class HistoryItem(BaseModel):
    id: str
    word: str
    language: str
    updated_at: datetime

    model_config = {"from_attributes": True}
