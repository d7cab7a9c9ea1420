import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from flask import current_app, has_app_context
from pymongo.database import Database

from flashdeck.domain.errors import CollectionNotFoundError, InvalidCollectionError
from flashdeck.domain.models.api_models import CollectionView
from flashdeck.domain.models.db_models import Flashcard, FlashcardCollection
from flashdeck.infrastructure.database import db as flask_db
from flashdeck.infrastructure.repositories import MongoCollectionRepository
from flashdeck.utils.card_parser import filter_valid_cards
from flashdeck.utils.time_utils import format_relative_time
from flashdeck.utils.url_utils import (
    create_collection_path,
    extract_id_from_path,
    format_path_for_display,
)
from fd_utils.logger_utils import logger
from fd_utils.validation import RUSSIAN_ERRORS, validate_collection_name

DEFAULT_COLLECTIONS_TABLE = "flashcards"
SORT_FIELDS = ("edited_at", "name")


def _get_repo(db_conn: Database | None = None) -> MongoCollectionRepository:
    table = DEFAULT_COLLECTIONS_TABLE
    if has_app_context():
        table = current_app.config.get("COLLECTIONS_TABLE", DEFAULT_COLLECTIONS_TABLE)
    return MongoCollectionRepository(db_conn if db_conn is not None else flask_db, table)


def _require_valid_cards(cards: Iterable[Flashcard]) -> List[Flashcard]:
    valid_cards = filter_valid_cards(cards)
    if not valid_cards:
        raise InvalidCollectionError(RUSSIAN_ERRORS["no_valid_cards"])
    return valid_cards


def create_collection(
    collection_name: str,
    content: Iterable[Flashcard],
    db_conn: Database | None = None,
) -> FlashcardCollection:
    """
    Creates a collection with a freshly generated `slug/NNNN` URL path.
    Cards with a blank question or answer are dropped.
    """
    error = validate_collection_name(collection_name)
    if error:
        raise InvalidCollectionError(error)
    collection_name = collection_name.strip()

    collection = FlashcardCollection(
        _id=str(uuid.uuid4()),
        collection_name=collection_name,
        content=_require_valid_cards(content),
        url_path=create_collection_path(collection_name),
    )
    _get_repo(db_conn).create(collection)
    return collection


def get_collections(
    query: Optional[str] = None,
    sort: str = "edited_at",
    db_conn: Database | None = None,
) -> List[FlashcardCollection]:
    """
    Lists collections, most recently edited first.

    `query` keeps collections whose name contains it (case-insensitive);
    `sort="name"` orders alphabetically instead.
    """
    if sort not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort}")

    collections = _get_repo(db_conn).list_all()

    if query and query.strip():
        needle = query.strip().casefold()
        collections = [c for c in collections if needle in c.collection_name.casefold()]

    if sort == "name":
        collections.sort(key=lambda c: c.collection_name.casefold())

    return collections


def get_collection_by_id(collection_id: str, db_conn: Database | None = None) -> Optional[FlashcardCollection]:
    return _get_repo(db_conn).get_by_id(collection_id)


def get_collection_by_path(url_path: str, db_conn: Database | None = None) -> Optional[FlashcardCollection]:
    return _get_repo(db_conn).get_by_path(url_path)


def update_collection(
    collection_id: str,
    collection_name: Optional[str] = None,
    content: Optional[Iterable[Flashcard]] = None,
    db_conn: Database | None = None,
) -> FlashcardCollection:
    """
    Renames a collection and/or replaces its cards.

    On rename the URL path is rebuilt from the new name while the number
    after the slash is kept, so `old_name/4821` becomes `new_name/4821`.
    A stored path without a number gets a brand-new one.
    """
    repo = _get_repo(db_conn)
    updates: dict = {}

    if content is not None:
        updates["content"] = [card.model_dump() for card in _require_valid_cards(content)]

    if collection_name is not None:
        error = validate_collection_name(collection_name)
        if error:
            raise InvalidCollectionError(error)
        collection_name = collection_name.strip()

        current = repo.get_by_id(collection_id)
        if current is None:
            raise CollectionNotFoundError(f"Collection {collection_id} not found")

        path_number = extract_id_from_path(current.url_path or "")
        if path_number:
            updates["url_path"] = create_collection_path(collection_name, path_number)
        else:
            logger.warning(
                f"Collection {collection_id} has no path number, generating a new path."
            )
            updates["url_path"] = create_collection_path(collection_name)
        updates["collection_name"] = collection_name

    updates["edited_at"] = datetime.now(timezone.utc)

    updated = repo.update(collection_id, updates)
    if updated is None:
        raise CollectionNotFoundError(f"Collection {collection_id} not found")
    return updated


def delete_collection(collection_id: str, db_conn: Database | None = None) -> None:
    if not _get_repo(db_conn).delete(collection_id):
        raise CollectionNotFoundError(f"Collection {collection_id} not found")


def add_card_to_collection(
    collection_id: str,
    card: Flashcard,
    db_conn: Database | None = None,
) -> FlashcardCollection:
    """Appends one card to the end of a collection."""
    if not card.is_valid():
        raise InvalidCollectionError(RUSSIAN_ERRORS["empty_card"])

    repo = _get_repo(db_conn)
    current = repo.get_by_id(collection_id)
    if current is None:
        raise CollectionNotFoundError(f"Collection {collection_id} not found")

    content = [c.model_dump() for c in current.content] + [card.model_dump()]
    updated = repo.update(
        collection_id,
        {"content": content, "edited_at": datetime.now(timezone.utc)},
    )
    if updated is None:
        raise CollectionNotFoundError(f"Collection {collection_id} not found")

    logger.info(f"Added card to collection {collection_id}, now {updated.card_count} cards.")
    return updated


def to_view(collection: FlashcardCollection, now: Optional[datetime] = None) -> CollectionView:
    """Builds the API representation with display label and relative edit time."""
    return CollectionView(
        id=collection.id,
        collection_name=collection.collection_name,
        content=collection.content,
        edited_at=collection.edited_at.isoformat(),
        url_path=collection.url_path,
        display_path=format_path_for_display(collection.url_path or ""),
        edited_ago=format_relative_time(collection.edited_at, now=now),
        card_count=collection.card_count,
    )
