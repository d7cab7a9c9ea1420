from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime, timezone


def _utc_now():
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


class Flashcard(BaseModel):
    """A single question/answer pair."""
    question: str
    answer: str

    def is_valid(self) -> bool:
        return bool(self.question.strip() and self.answer.strip())


class FlashcardCollection(BaseModel):
    """A named collection of flashcards, stored in the `flashcards` collection."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    collection_name: str
    content: List[Flashcard] = Field(default_factory=list)
    edited_at: datetime = Field(default_factory=_utc_now)
    url_path: Optional[str] = None  # legacy rows were stored without a path

    def to_dict(self):
        """Convert model to dictionary for MongoDB."""
        return self.model_dump(by_alias=True)

    @property
    def card_count(self) -> int:
        return len(self.content)
