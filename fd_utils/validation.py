from typing import Optional
import logging

logger = logging.getLogger(__name__)

MAX_COLLECTION_NAME_LENGTH = 200

# user-facing messages (the UI is Russian)
RUSSIAN_ERRORS = {
    "empty_name": "Пожалуйста, введите название для вашей коллекции",
    "name_too_long": "Название коллекции слишком длинное",
    "no_cards": "Не удалось создать ни одной действительной флеш-карточки. Пожалуйста, проверьте ваш ввод.",
    "no_valid_cards": "У вас должна быть хотя бы одна действительная карточка с вопросом и ответом",
    "empty_card": "Вопрос и ответ не могут быть пустыми",
    "not_found": "Коллекция не найдена",
    "server_error": "Произошла ошибка на сервере. Попробуйте позже.",
    "invalid_request": "Неверный формат запроса",
    # parser messages, formatted with the offending line or separator
    "missing_separator": "Строка не содержит разделитель \"{separator}\": {line}",
    "invalid_card_line": "Неверный формат карточки в строке: {line}",
    "missing_answer_line": "У вопроса нет строки с ответом: {line}",
    "empty_custom_separator": "Свой разделитель не может быть пустым",
    "unknown_separator": "Неизвестный разделитель: {separator}",
}


def validate_collection_name(name: Optional[str]) -> Optional[str]:
    """
    Validate a collection display name.
    Returns a Russian error message if invalid, otherwise None.
    """
    if name is None or not name.strip():
        logger.debug("Validation failed: empty collection name")
        return RUSSIAN_ERRORS["empty_name"]
    if len(name) > MAX_COLLECTION_NAME_LENGTH:
        logger.debug("Validation failed: name too long (len=%d)", len(name))
        return RUSSIAN_ERRORS["name_too_long"]
    return None
