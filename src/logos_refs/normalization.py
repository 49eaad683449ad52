"""Normalization helpers for cite keys, book names and Logos text markup."""
from __future__ import annotations

import re

_NON_KEY_CHARS = re.compile(r"[_\W]+")
_REPEATED_HYPHENS = re.compile(r"-+")
_WHITESPACE = re.compile(r"\s+")
_DOUBLE_UNDERSCORE = re.compile(r"__(.*?)__")
_SINGLE_UNDERSCORE = re.compile(r"_(.*?)_")

# Longest numeral first so "iii" is never read as "ii" + "i".
ROMAN_PREFIXES = (("iii", "3"), ("ii", "2"), ("i", "1"))


def sanitize_cite_key(value: str) -> str:
    """Collapse underscores and punctuation in a cite key into single hyphens."""
    key = _NON_KEY_CHARS.sub("-", value)
    key = _REPEATED_HYPHENS.sub("-", key)
    return key.strip("-")


def normalize_book_token(value: str) -> str:
    """Lowercase a book name candidate and drop all whitespace."""
    return _WHITESPACE.sub("", value.lower())


def replace_roman_prefix(token: str) -> str:
    """Swap a leading roman numeral for its digit (e.g. ``iijohn`` -> ``2john``)."""
    for numeral, digit in ROMAN_PREFIXES:
        if token.startswith(numeral):
            return digit + token[len(numeral):]
    return token


def clean_formatted_text(text: str) -> str:
    """Convert Logos underscore markup into markdown.

    ``__text__`` becomes ``<sup>text</sup>`` and the remaining ``_text_`` spans
    become ``*text*``. The double underscore pass has to run first, otherwise
    the single underscore rule eats half of every double marker. Asterisk
    markup is left alone.
    """
    if not text:
        return text
    processed = _DOUBLE_UNDERSCORE.sub(r"<sup>\1</sup>", text)
    return _SINGLE_UNDERSCORE.sub(r"*\1*", processed)
