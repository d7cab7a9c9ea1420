from datetime import datetime, timezone
from unittest.mock import patch

from flashdeck.domain.errors import CollectionNotFoundError, InvalidCollectionError
from flashdeck.domain.models.db_models import FlashcardCollection

SERVICE = 'flashdeck.services.collection_service'


def _collection(**overrides):
    data = {
        "_id": "col-123",
        "collection_name": "Привет, мир!",
        "content": [{"question": "Q1", "answer": "A1"}],
        "edited_at": datetime(2024, 6, 1, tzinfo=timezone.utc),
        "url_path": "privet_mir/4821",
    }
    data.update(overrides)
    return FlashcardCollection(**data)


def test_create_from_text(client):
    """
    Test that pasted text is parsed with the chosen separator before saving.
    """
    with patch(f'{SERVICE}.create_collection') as mock_create:
        mock_create.return_value = _collection()

        response = client.post('/api/collections/', json={
            "collection_name": "Привет, мир!",
            "text": "Q1\tA1\nQ2\tA2",
            "separator": "tab",
        })

    assert response.status_code == 201
    assert response.json['url_path'] == "privet_mir/4821"
    assert response.json['display_path'] == "Privet Mir #4821"
    name, cards = mock_create.call_args[0]
    assert name == "Привет, мир!"
    assert [(c.question, c.answer) for c in cards] == [("Q1", "A1"), ("Q2", "A2")]


def test_create_from_card_list(client):
    with patch(f'{SERVICE}.create_collection') as mock_create:
        mock_create.return_value = _collection()

        response = client.post('/api/collections/', json={
            "collection_name": "Deck",
            "content": [{"question": "Q1", "answer": "A1"}],
        })

    assert response.status_code == 201
    assert response.json['card_count'] == 1


def test_create_with_unparseable_text(client):
    response = client.post('/api/collections/', json={
        "collection_name": "Deck",
        "text": "no separator here",
    })
    assert response.status_code == 400
    assert response.json['error'] == 'Строка не содержит разделитель ",": no separator here'


def test_create_with_empty_text(client):
    response = client.post('/api/collections/', json={"collection_name": "Deck", "text": "\n\n"})
    assert response.status_code == 400


def test_create_requires_cards_source(client):
    response = client.post('/api/collections/', json={"collection_name": "Deck"})
    assert response.status_code == 400
    assert 'error' in response.json


def test_create_rejects_unknown_separator(client):
    response = client.post('/api/collections/', json={
        "collection_name": "Deck", "text": "a|b", "separator": "pipe",
    })
    assert response.status_code == 400


def test_create_rejects_blank_name(client):
    with patch(f'{SERVICE}.create_collection', side_effect=InvalidCollectionError("empty")):
        response = client.post('/api/collections/', json={
            "collection_name": "   ", "content": [{"question": "Q", "answer": "A"}],
        })
    assert response.status_code == 400


def test_list_collections(client):
    with patch(f'{SERVICE}.get_collections') as mock_list:
        mock_list.return_value = [_collection(), _collection(_id="col-2")]
        response = client.get('/api/collections/', query_string={"q": "мир", "sort": "name"})

    assert response.status_code == 200
    assert [c['id'] for c in response.json] == ["col-123", "col-2"]
    mock_list.assert_called_once_with(query="мир", sort="name")


def test_list_collections_bad_sort(client):
    response = client.get('/api/collections/?sort=size')
    assert response.status_code == 400


def test_get_collection_not_found(client):
    with patch(f'{SERVICE}.get_collection_by_id', return_value=None):
        response = client.get('/api/collections/missing')
    assert response.status_code == 404


def test_rename_collection(client):
    with patch(f'{SERVICE}.update_collection') as mock_update:
        mock_update.return_value = _collection(collection_name="New Name", url_path="new_name/4821")
        response = client.patch('/api/collections/col-123', json={"collection_name": "New Name"})

    assert response.status_code == 200
    assert response.json['url_path'] == "new_name/4821"
    mock_update.assert_called_once_with("col-123", collection_name="New Name", content=None)


def test_update_missing_collection(client):
    with patch(f'{SERVICE}.update_collection', side_effect=CollectionNotFoundError("missing")):
        response = client.patch('/api/collections/missing', json={"collection_name": "X"})
    assert response.status_code == 404


def test_delete_collection(client):
    with patch(f'{SERVICE}.delete_collection') as mock_delete:
        response = client.delete('/api/collections/col-123')
    assert response.status_code == 204
    mock_delete.assert_called_once_with("col-123")


def test_delete_missing_collection(client):
    with patch(f'{SERVICE}.delete_collection', side_effect=CollectionNotFoundError("missing")):
        response = client.delete('/api/collections/missing')
    assert response.status_code == 404


def test_add_card(client):
    with patch(f'{SERVICE}.add_card_to_collection') as mock_add:
        mock_add.return_value = _collection()
        response = client.post('/api/collections/col-123/cards', json={"question": "Q", "answer": "A"})

    assert response.status_code == 201
    collection_id, card = mock_add.call_args[0]
    assert collection_id == "col-123"
    assert (card.question, card.answer) == ("Q", "A")


def test_add_card_missing_answer(client):
    response = client.post('/api/collections/col-123/cards', json={"question": "Q"})
    assert response.status_code == 400


def test_service_failure_returns_500(client):
    with patch(f'{SERVICE}.get_collections', side_effect=RuntimeError("db down")):
        response = client.get('/api/collections/')
    assert response.status_code == 500


def test_create_with_non_object_body(client):
    response = client.post('/api/collections/', json=[{"collection_name": "Deck", "content": []}])
    assert response.status_code == 400
    assert 'error' in response.json


def test_update_with_non_object_body(client):
    response = client.patch('/api/collections/col-123', json=["x"])
    assert response.status_code == 400
    assert 'error' in response.json


def test_add_card_with_string_body(client):
    response = client.post('/api/collections/col-123/cards', json="just a string")
    assert response.status_code == 400
    assert 'error' in response.json


def test_unreadable_body_is_treated_as_empty(client):
    response = client.post('/api/collections/', data="{not json", content_type='application/json')
    assert response.status_code == 400
