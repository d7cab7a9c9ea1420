from pydantic import BaseModel, Field, model_validator
from typing import List, Literal, Optional

from .db_models import Flashcard

Separator = Literal["comma", "tab", "newline", "custom"]


class CreateCollectionRequest(BaseModel):
    """
    Request model for creating a collection.

    Cards come either as a ready list (`content`) or as pasted `text` that is
    split with the chosen separator.
    """
    collection_name: str = Field(..., min_length=1, max_length=200)
    content: Optional[List[Flashcard]] = None
    text: Optional[str] = None
    separator: Separator = "comma"
    custom_separator: str = ","

    @model_validator(mode="after")
    def _require_cards_source(self):
        if self.content is None and self.text is None:
            raise ValueError("Either 'content' or 'text' must be provided.")
        return self


class UpdateCollectionRequest(BaseModel):
    """Request model for renaming a collection and/or replacing its cards."""
    collection_name: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[List[Flashcard]] = None


class AddCardRequest(BaseModel):
    """Request model for appending one card to a collection."""
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class CollectionView(BaseModel):
    """Response model: the stored collection plus display helpers."""
    id: str
    collection_name: str
    content: List[Flashcard]
    edited_at: str
    url_path: Optional[str] = None
    display_path: str = ""
    edited_ago: str = ""
    card_count: int = 0

    def to_dict(self):
        return self.model_dump()
