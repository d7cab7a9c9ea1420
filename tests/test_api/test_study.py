from datetime import datetime, timezone
from unittest.mock import patch

from flashdeck.domain.models.db_models import FlashcardCollection


def _collection():
    return FlashcardCollection(
        _id="col-123",
        collection_name="My Cool Deck",
        content=[{"question": "Q1", "answer": "A1"}],
        edited_at=datetime(2024, 6, 1, tzinfo=timezone.utc),
        url_path="my_cool_deck/4821",
    )


def test_study_by_path(client):
    with patch('flashdeck.services.collection_service.get_collection_by_path') as mock_get:
        mock_get.return_value = _collection()
        response = client.get('/api/study/my_cool_deck/4821?mode=all')

    assert response.status_code == 200
    assert response.json['mode'] == "all"
    assert response.json['display_path'] == "My Cool Deck #4821"
    mock_get.assert_called_once_with("my_cool_deck/4821")


def test_study_default_mode(client):
    with patch('flashdeck.services.collection_service.get_collection_by_path', return_value=_collection()):
        response = client.get('/api/study/my_cool_deck/4821')
    assert response.json['mode'] == "single"


def test_study_unknown_path(client):
    with patch('flashdeck.services.collection_service.get_collection_by_path', return_value=None):
        response = client.get('/api/study/gone/1234')
    assert response.status_code == 404


def test_study_bad_mode(client):
    response = client.get('/api/study/my_cool_deck/4821?mode=shuffle')
    assert response.status_code == 400
