from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from flashdeck.domain.errors import CollectionNotFoundError, InvalidCollectionError, ParsingError
from flashdeck.domain.models.api_models import (
    AddCardRequest,
    CreateCollectionRequest,
    UpdateCollectionRequest,
)
from flashdeck.domain.models.db_models import Flashcard
from flashdeck.services import collection_service
from flashdeck.utils.card_parser import parse_cards
from fd_utils.logger_utils import logger
from fd_utils.validation import RUSSIAN_ERRORS

collections_bp = Blueprint('collections_bp', __name__)


def _not_found():
    return jsonify({"error": RUSSIAN_ERRORS["not_found"]}), 404


@collections_bp.route('/', methods=['GET'])
def list_collections():
    """Lists collections; supports ?q= filtering and ?sort=edited_at|name."""
    query = request.args.get('q')
    sort = request.args.get('sort', 'edited_at')
    if sort not in collection_service.SORT_FIELDS:
        return jsonify({"error": f"Unsupported sort field: {sort}"}), 400

    try:
        collections = collection_service.get_collections(query=query, sort=sort)
    except Exception as e:
        logger.error(f"Failed to load collections: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["server_error"]}), 500

    return jsonify([collection_service.to_view(c).to_dict() for c in collections]), 200


@collections_bp.route('/', methods=['POST'])
def create_collection():
    """Creates a collection from a card list or from pasted text."""
    try:
        req_data = CreateCollectionRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400
    except Exception as e:
        logger.error(f"Failed to parse CreateCollectionRequest body: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["invalid_request"]}), 400

    try:
        if req_data.text is not None:
            cards = parse_cards(req_data.text, req_data.separator, req_data.custom_separator)
        else:
            cards = req_data.content
        if not cards:
            return jsonify({"error": RUSSIAN_ERRORS["no_cards"]}), 400

        collection = collection_service.create_collection(req_data.collection_name, cards)
    except (ParsingError, InvalidCollectionError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Failed to create collection: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["server_error"]}), 500

    logger.info(f"Created collection {collection.id} at path {collection.url_path}")
    return jsonify(collection_service.to_view(collection).to_dict()), 201


@collections_bp.route('/<collection_id>', methods=['GET'])
def get_collection(collection_id):
    collection = collection_service.get_collection_by_id(collection_id)
    if collection is None:
        return _not_found()
    return jsonify(collection_service.to_view(collection).to_dict()), 200


@collections_bp.route('/<collection_id>', methods=['PATCH'])
def update_collection(collection_id):
    """Renames a collection and/or replaces its cards."""
    try:
        req_data = UpdateCollectionRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400
    except Exception as e:
        logger.error(f"Failed to parse UpdateCollectionRequest body: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["invalid_request"]}), 400

    try:
        collection = collection_service.update_collection(
            collection_id,
            collection_name=req_data.collection_name,
            content=req_data.content,
        )
    except CollectionNotFoundError:
        return _not_found()
    except InvalidCollectionError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Failed to update collection {collection_id}: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["server_error"]}), 500

    return jsonify(collection_service.to_view(collection).to_dict()), 200


@collections_bp.route('/<collection_id>', methods=['DELETE'])
def delete_collection(collection_id):
    try:
        collection_service.delete_collection(collection_id)
    except CollectionNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Failed to delete collection {collection_id}: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["server_error"]}), 500
    return '', 204


@collections_bp.route('/<collection_id>/cards', methods=['POST'])
def add_card(collection_id):
    try:
        req_data = AddCardRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400
    except Exception as e:
        logger.error(f"Failed to parse AddCardRequest body: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["invalid_request"]}), 400

    try:
        collection = collection_service.add_card_to_collection(
            collection_id, Flashcard(question=req_data.question, answer=req_data.answer)
        )
    except CollectionNotFoundError:
        return _not_found()
    except InvalidCollectionError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Failed to add card to collection {collection_id}: {e}", exc_info=True)
        return jsonify({"error": RUSSIAN_ERRORS["server_error"]}), 500

    return jsonify(collection_service.to_view(collection).to_dict()), 201
