from flask import Blueprint, request, jsonify

from flashdeck.services import collection_service
from fd_utils.logger_utils import logger
from fd_utils.validation import RUSSIAN_ERRORS

study_bp = Blueprint('study_bp', __name__)

STUDY_MODES = ("single", "all")


@study_bp.route('/<path:url_path>', methods=['GET'])
def study_collection(url_path):
    """
    Loads a collection by its shareable path (e.g. /api/study/privet_mir/4821)
    for studying one card at a time ("single") or as a grid ("all").
    """
    mode = request.args.get('mode', 'single')
    if mode not in STUDY_MODES:
        return jsonify({"error": f"Unsupported study mode: {mode}"}), 400

    collection = collection_service.get_collection_by_path(url_path)
    if collection is None:
        logger.warning(f"Study requested for unknown path: {url_path}")
        return jsonify({"error": RUSSIAN_ERRORS["not_found"]}), 404

    view = collection_service.to_view(collection).to_dict()
    view["mode"] = mode
    return jsonify(view), 200
