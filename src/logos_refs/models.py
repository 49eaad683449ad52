"""Data models for clipboard parsing and note rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class ParsedClipboard:
    """Represents clipboard text split into quote, BibTeX record and page."""

    main_text: str
    bibtex: str
    page: Optional[str] = None
    refly_link: Optional[str] = None

    @property
    def has_bibtex(self) -> bool:
        return bool(self.bibtex)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Return the camelCase shape used by the Obsidian plugin."""
        return {
            "mainText": self.main_text,
            "bibtex": self.bibtex,
            "page": self.page,
            "reflyLink": self.refly_link,
        }


@dataclass
class PageExtraction:
    """Result of stripping a trailing page marker such as ``(p. 42)``."""

    cleaned_text: str
    page: Optional[str] = None


@dataclass
class PastedReference:
    """Everything produced by pasting one Logos clipboard into a note."""

    cite_key: str
    note_name: str
    file_path: str
    block_id: str
    callout: str
    link_back: str
    reference_note: str
    parsed: ParsedClipboard
    book_title: Optional[str] = None
    page: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "citeKey": self.cite_key,
            "bookTitle": self.book_title,
            "noteName": self.note_name,
            "filePath": self.file_path,
            "blockId": self.block_id,
            "page": self.page,
            "callout": self.callout,
            "linkBack": self.link_back,
            "referenceNote": self.reference_note,
            "parsed": self.parsed.to_dict(),
        }
