"""Parse Logos clipboard citations and link scripture references."""

from .app import LogosReferenceApp
from .bible_books import BIBLE_BOOKS, VERSION_MAPPING
from .clipboard_parser import (
    ClipboardParser,
    MissingCiteKeyError,
    extract_book_title,
    extract_cite_key,
    extract_page_number,
    extract_pages_from_bibtex,
    parse_logos_clipboard,
)
from .config import PluginSettings
from .formatter import NoteFormatter
from .models import PageExtraction, ParsedClipboard, PastedReference
from .normalization import clean_formatted_text
from .verse_linker import VerseLinker, get_version_code, link_verses

__all__ = [
    "LogosReferenceApp",
    "BIBLE_BOOKS",
    "VERSION_MAPPING",
    "ClipboardParser",
    "MissingCiteKeyError",
    "extract_book_title",
    "extract_cite_key",
    "extract_page_number",
    "extract_pages_from_bibtex",
    "parse_logos_clipboard",
    "PluginSettings",
    "NoteFormatter",
    "PageExtraction",
    "ParsedClipboard",
    "PastedReference",
    "clean_formatted_text",
    "VerseLinker",
    "get_version_code",
    "link_verses",
]
