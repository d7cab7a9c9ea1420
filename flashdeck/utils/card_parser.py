from typing import Iterable, List

from flashdeck.domain.errors import ParsingError
from flashdeck.domain.models.db_models import Flashcard
from fd_utils.logger_utils import logger
from fd_utils.validation import RUSSIAN_ERRORS

SEPARATORS = {
    "comma": ",",
    "tab": "\t",
    "newline": "\n",
}


def resolve_separator(separator: str, custom_separator: str = ",") -> str:
    """
    Maps a separator choice ("comma", "tab", "newline", "custom") to the
    actual string. "custom" uses `custom_separator`, which must be non-empty.
    """
    if separator == "custom":
        if not custom_separator:
            raise ParsingError(RUSSIAN_ERRORS["empty_custom_separator"])
        return custom_separator
    try:
        return SEPARATORS[separator]
    except KeyError:
        raise ParsingError(RUSSIAN_ERRORS["unknown_separator"].format(separator=separator)) from None


def _parse_line(line: str, actual_separator: str) -> Flashcard:
    parts = line.split(actual_separator)
    if len(parts) < 2:
        raise ParsingError(RUSSIAN_ERRORS["missing_separator"].format(separator=actual_separator, line=line))

    # First part is the question, everything after it is the answer
    question = parts[0].strip()
    answer = actual_separator.join(parts[1:]).strip()
    if not question or not answer:
        raise ParsingError(RUSSIAN_ERRORS["invalid_card_line"].format(line=line))
    return Flashcard(question=question, answer=answer)


def _pair_lines(lines: List[str]) -> List[Flashcard]:
    if len(lines) % 2:
        raise ParsingError(RUSSIAN_ERRORS["missing_answer_line"].format(line=lines[-1]))
    return [
        Flashcard(question=question.strip(), answer=answer.strip())
        for question, answer in zip(lines[0::2], lines[1::2])
    ]


def parse_cards(text: str, separator: str = "comma", custom_separator: str = ",") -> List[Flashcard]:
    """
    Splits pasted text into flashcards.

    Every non-blank line becomes a card: the text before the first separator
    is the question and the rest is the answer. With the "newline" separator
    consecutive non-blank lines are paired instead (question, answer, ...).
    Raises ParsingError for a line that cannot be turned into a card.
    """
    actual_separator = resolve_separator(separator, custom_separator)
    lines = [line for line in text.split("\n") if line.strip()]

    if actual_separator == "\n":
        cards = _pair_lines(lines)
    else:
        cards = [_parse_line(line, actual_separator) for line in lines]

    logger.info(f"Parsed {len(cards)} flashcards using separator '{separator}'.")
    return cards


def filter_valid_cards(cards: Iterable[Flashcard]) -> List[Flashcard]:
    """Drops cards with a blank question or answer."""
    return [card for card in cards if card.is_valid()]
