from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.db_models import FlashcardCollection

class ICollectionRepository(ABC):
    """Interface for a flashcard collection repository."""
    @abstractmethod
    def get_by_id(self, collection_id: str) -> Optional[FlashcardCollection]:
        pass

    @abstractmethod
    def get_by_path(self, url_path: str) -> Optional[FlashcardCollection]:
        pass

    @abstractmethod
    def list_all(self) -> List[FlashcardCollection]:
        pass

    @abstractmethod
    def create(self, collection: FlashcardCollection) -> None:
        pass

    @abstractmethod
    def update(self, collection_id: str, updates: dict) -> Optional[FlashcardCollection]:
        pass

    @abstractmethod
    def delete(self, collection_id: str) -> bool:
        pass
