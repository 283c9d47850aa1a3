"""Text helpers for URL-safe identifiers."""

import re

from unidecode import unidecode

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, separator: str = "-") -> str:
    """Turn ``text`` into a lowercase, URL-safe slug.

    Text is transliterated to ASCII first, so accented Latin letters
    lose their marks and Arabic titles keep a readable spelling
    (``"فيلا"`` becomes ``"fyla"``). Every run of non-alphanumeric
    characters collapses to one ``separator`` and separators are
    trimmed from both ends.

    >>> slugify("Modern Villa in Abdoun!")
    'modern-villa-in-abdoun'
    """
    ascii_text = unidecode(text or "").lower()
    return _NON_ALNUM.sub(separator, ascii_text).strip(separator)
