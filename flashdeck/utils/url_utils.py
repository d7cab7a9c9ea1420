"""
Shareable URL paths for flashcard collections.

A collection path has the shape ``<slug>/<discriminator>``, e.g.
``privet_mir/4821``. The slug is derived from the collection name; the
discriminator is a random 4-digit number picked once when the collection is
created and carried over on every rename.
"""
import random
import re
from types import MappingProxyType
from typing import Optional

DEFAULT_SLUG = "collection"
RANDOM_ID_MIN = 1000
RANDOM_ID_MAX = 9999

CYRILLIC_TO_LATIN = MappingProxyType({
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d",
    "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i",
    "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "sch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
    # Ukrainian
    "є": "ye", "і": "i", "ї": "yi", "ґ": "g",
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D",
    "Е": "E", "Ё": "Yo", "Ж": "Zh", "З": "Z", "И": "I",
    "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N",
    "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T",
    "У": "U", "Ф": "F", "Х": "H", "Ц": "Ts", "Ч": "Ch",
    "Ш": "Sh", "Щ": "Sch", "Ъ": "", "Ы": "Y", "Ь": "",
    "Э": "E", "Ю": "Yu", "Я": "Ya",
    "Є": "Ye", "І": "I", "Ї": "Yi", "Ґ": "G",
})

# Word characters are ASCII only, whitespace is any Unicode space
_SPECIAL_CHARS_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")
_EDGE_UNDERSCORES_RE = re.compile(r"^_+|_+$")


def transliterate_cyrillic(text: str) -> str:
    """
    Replaces Russian and Ukrainian letters with their Latin spelling.
    Anything not in the table is kept as is; hard and soft signs are dropped.
    """
    return "".join(CYRILLIC_TO_LATIN.get(char, char) for char in text)


def name_to_slug(name: str) -> str:
    """
    Converts a collection name into a URL-friendly slug.

    The result only contains ``[a-z0-9_]`` and may be empty, e.g. for a name
    made of punctuation or emoji. Callers building a path substitute
    ``DEFAULT_SLUG`` in that case.
    """
    slug = transliterate_cyrillic(name).lower()
    slug = _SPECIAL_CHARS_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("_", slug)
    slug = _HYPHENS_RE.sub("_", slug)
    slug = slug.strip()
    return _EDGE_UNDERSCORES_RE.sub("", slug)


def generate_random_id() -> str:
    """Returns a random 4-digit number as a string (never zero-padded)."""
    return str(random.randint(RANDOM_ID_MIN, RANDOM_ID_MAX))


def create_collection_path(name: str, discriminator: Optional[str] = None) -> str:
    """
    Builds the ``slug/discriminator`` path for a collection.

    Pass the discriminator of an existing path to keep it stable across
    renames; omit it to draw a fresh one. Nothing here checks the database
    for an existing collection with the same path.
    """
    slug = name_to_slug(name) or DEFAULT_SLUG
    random_id = discriminator or generate_random_id()
    return f"{slug}/{random_id}"


def extract_id_from_path(path: str) -> Optional[str]:
    """
    Returns the discriminator (the segment after the last ``/``), or None when
    the path has no ``/`` at all.
    """
    parts = path.split("/")
    if len(parts) >= 2:
        return parts[-1]
    return None


def _capitalize_first(word: str) -> str:
    # str.capitalize() would lowercase the rest of the word
    return word[:1].upper() + word[1:]


def format_path_for_display(path: str) -> str:
    """
    Renders a path as a readable label: ``my_cool_deck/4821`` becomes
    ``My Cool Deck #4821``.
    """
    if not path:
        return ""

    slug, sep, random_id = path.rpartition("/")
    if not sep:
        return path

    words = " ".join(_capitalize_first(word) for word in slug.split("_"))
    return f"{words} #{random_id}"
