"""Detection of scripture references and conversion into Logos ref.ly links."""
from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from .bible_books import BIBLE_BOOKS, VERSION_MAPPING
from .normalization import normalize_book_token, replace_roman_prefix

logger = logging.getLogger(__name__)

REFLY_BASE_URL = "https://ref.ly"


def get_version_code(translation: str, mapping: Mapping[str, str] = VERSION_MAPPING) -> str:
    """Return the Logos version code for a translation, or the input unchanged."""
    return mapping.get(translation.lower(), translation)


class VerseLinker:
    """Rewrite references like ``John 3:16`` or ``1 Cor. 13:4-7`` as markdown links.

    Unknown book names are left untouched.
    """

    VERSE_PATTERN = re.compile(
        r"\b((?:[123]|I{1,3})\s*)?([A-Za-z]+)\.?\s+(\d+):(\d+)(?:\s*[-–]\s*(\d+))?\b",
        re.ASCII,
    )

    def __init__(
        self,
        books: Mapping[str, str] = BIBLE_BOOKS,
        versions: Mapping[str, str] = VERSION_MAPPING,
    ):
        self.books = books
        self.versions = versions

    def link(self, text: str, translation: str = "esv") -> str:
        version = get_version_code(translation, self.versions)

        def _replace(match: re.Match) -> str:
            prefix, book, chapter, verse, end_verse = match.groups()
            book_code = self.lookup_book(prefix, book)
            if not book_code:
                return match.group(0)
            ref = f"{book_code}{chapter}.{verse}"
            if end_verse:
                ref = f"{ref}-{end_verse}"
            return f"[{match.group(0)}]({REFLY_BASE_URL}/{ref};{version})"

        return self.VERSE_PATTERN.sub(_replace, text)

    def lookup_book(self, prefix: Optional[str], book: str) -> Optional[str]:
        token = normalize_book_token((prefix or "") + book)
        code = self.books.get(replace_roman_prefix(token))
        if code is None:
            # "Isaiah" and "Is" start with a letter that reads as a numeral.
            code = self.books.get(token)
        if code is None:
            logger.debug("Unrecognized book name %r", token)
        return code


_default_linker = VerseLinker()


def link_verses(text: str, translation: str = "esv") -> str:
    """Link every recognized scripture reference in ``text`` to Logos."""
    return _default_linker.link(text, translation)
