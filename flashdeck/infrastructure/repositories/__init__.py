from typing import List, Optional

import pymongo
from pymongo import ReturnDocument
from pymongo.database import Database

from flashdeck.domain.repositories import ICollectionRepository
from flashdeck.domain.models.db_models import FlashcardCollection
from fd_utils.logger_utils import logger


class MongoCollectionRepository(ICollectionRepository):
    """MongoDB implementation of the flashcard collection repository."""

    def __init__(self, db: Database, collection_name: str = "flashcards"):
        self.db = db
        self.collection = self.db[collection_name]

    def _parse(self, data: Optional[dict], **context) -> Optional[FlashcardCollection]:
        if not data:
            return None
        try:
            return FlashcardCollection(**data)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "MongoCollectionRepository.parse_error",
                extra={**context, "error": str(exc)},
                exc_info=True,
            )
            return None

    def get_by_id(self, collection_id: str) -> Optional[FlashcardCollection]:
        data = self.collection.find_one({"_id": collection_id})
        if not data:
            logger.warning(
                "MongoCollectionRepository.get_by_id.missing",
                extra={"collection_id": collection_id},
            )
            return None
        return self._parse(data, collection_id=collection_id)

    def get_by_path(self, url_path: str) -> Optional[FlashcardCollection]:
        data = self.collection.find_one({"url_path": url_path})
        if not data:
            logger.warning(
                "MongoCollectionRepository.get_by_path.missing",
                extra={"url_path": url_path},
            )
            return None
        return self._parse(data, url_path=url_path)

    def list_all(self) -> List[FlashcardCollection]:
        cursor = self.collection.find({}).sort("edited_at", pymongo.DESCENDING)
        collections = []
        for data in cursor:
            parsed = self._parse(data, collection_id=data.get("_id"))
            if parsed is not None:
                collections.append(parsed)
        return collections

    def create(self, collection: FlashcardCollection) -> None:
        self.collection.insert_one(collection.to_dict())
        logger.info(
            f"Created collection '{collection.collection_name}' with ID: {collection.id}"
        )

    def update(self, collection_id: str, updates: dict) -> Optional[FlashcardCollection]:
        """
        Applies a `$set` with the given fields and returns the updated
        collection, or None when no document matched.
        """
        data = self.collection.find_one_and_update(
            {"_id": collection_id},
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if not data:
            logger.warning(
                "MongoCollectionRepository.update.not_found",
                extra={"collection_id": collection_id},
            )
            return None

        logger.info(
            "MongoCollectionRepository.update.ok",
            extra={"collection_id": collection_id, "fields": sorted(updates)},
        )
        return self._parse(data, collection_id=collection_id)

    def delete(self, collection_id: str) -> bool:
        result = self.collection.delete_one({"_id": collection_id})
        if result.deleted_count == 0:
            logger.warning(
                "MongoCollectionRepository.delete.not_found",
                extra={"collection_id": collection_id},
            )
            return False
        logger.info(f"Deleted collection with ID: {collection_id}")
        return True
