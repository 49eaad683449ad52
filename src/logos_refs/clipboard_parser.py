"""Parsers for Logos clipboard content and the BibTeX records it carries."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .models import PageExtraction, ParsedClipboard
from .normalization import sanitize_cite_key

logger = logging.getLogger(__name__)


class MissingCiteKeyError(ValueError):
    """Raised when a BibTeX record does not start with an ``@type{key,`` header."""

    def __init__(self, message: str = "Could not extract cite key"):
        super().__init__(message)


class ClipboardParser:
    """Splits Logos clipboard text into quote, BibTeX record and page.

    Logos copies the selected passage followed by a BibTeX entry. The quote
    may span several lines, so the split happens at the last whitespace run
    before an ``@type{`` marker rather than at the first newline. Field
    lookups assume flat ``key = {value}`` pairs; nested braces are not
    supported.
    """

    RECORD_BOUNDARY = re.compile(r"\s+(?=@\w+\{)")
    REFLY_PATTERN = re.compile(r"https?://ref\.ly/[^\s)}]+")
    PAGES_PATTERN = re.compile(r"""\bpages\s*=\s*[{"']([^}"']+)[}"']""", re.IGNORECASE)
    PAGES_FIELD_PATTERN = re.compile(
        r"""\bpages\s*=\s*(?:\{[^}]*\}|"[^"]*"|'[^']*'),?\s*\n?""", re.IGNORECASE
    )
    TITLE_PATTERN = re.compile(r"title\s*=\s*\{([^}]+)\}", re.IGNORECASE)
    CITE_KEY_PATTERN = re.compile(r"^@\w+\{([^,]+),")
    PAGE_MARKER_PATTERN = re.compile(
        r"[(\[ ]?(p{1,2}\.? ?\d+(?:[–-]\d+)?)[)\]]?\.?\Z", re.IGNORECASE
    )

    def parse(self, clipboard: str) -> ParsedClipboard:
        trimmed = clipboard.strip()

        if trimmed.startswith("@"):
            page = self.extract_pages(trimmed)
            return ParsedClipboard(
                main_text="",
                bibtex=self.strip_pages_field(trimmed),
                page=page,
                refly_link=self.extract_refly_link(trimmed),
            )

        boundaries = list(self.RECORD_BOUNDARY.finditer(trimmed))
        if not boundaries:
            logger.debug("No BibTeX marker found in clipboard text")
            return ParsedClipboard(main_text=trimmed, bibtex="", page=None)

        boundary = boundaries[-1]
        main_text = trimmed[: boundary.start()].strip()
        bibtex = trimmed[boundary.end():].strip()
        if len(boundaries) > 1:
            logger.debug("Found %d record markers; splitting at the last one", len(boundaries))

        refly_link = self.extract_refly_link(trimmed)
        if refly_link and refly_link in main_text:
            main_text = self._remove_refly_link(main_text, refly_link)

        page = self.extract_pages(bibtex)
        return ParsedClipboard(
            main_text=main_text.strip(),
            bibtex=self.strip_pages_field(bibtex),
            page=page,
            refly_link=refly_link,
        )

    def extract_refly_link(self, text: str) -> Optional[str]:
        match = self.REFLY_PATTERN.search(text)
        return match.group(0) if match else None

    def extract_pages(self, bibtex: str) -> Optional[str]:
        match = self.PAGES_PATTERN.search(bibtex)
        return match.group(1) if match else None

    def extract_title(self, bibtex: str) -> Optional[str]:
        match = self.TITLE_PATTERN.search(bibtex)
        return match.group(1) if match else None

    def strip_pages_field(self, bibtex: str) -> str:
        """Remove every ``pages`` field, with its trailing comma and newline."""
        return self.PAGES_FIELD_PATTERN.sub("", bibtex).strip()

    def extract_cite_key(self, bibtex: str) -> str:
        match = self.CITE_KEY_PATTERN.match(bibtex)
        if not match:
            raise MissingCiteKeyError()
        cite_key = sanitize_cite_key(match.group(1))
        if not cite_key:
            raise MissingCiteKeyError()
        return cite_key

    def extract_page_number(self, text: str) -> PageExtraction:
        match = self.PAGE_MARKER_PATTERN.search(text)
        if not match:
            return PageExtraction(cleaned_text=text.strip(), page=None)
        cleaned = (text[: match.start()] + text[match.end():]).strip()
        return PageExtraction(cleaned_text=cleaned, page=match.group(1))

    @staticmethod
    def _remove_refly_link(text: str, link: str) -> str:
        wrapper = re.compile(
            r"\s*\(?Resource Link:\s*" + re.escape(link) + r"\)?", re.IGNORECASE
        )
        text = wrapper.sub("", text, count=1)
        return text.replace(link, "", 1).strip()


_default_parser = ClipboardParser()


def parse_logos_clipboard(clipboard: str) -> ParsedClipboard:
    """Parse Logos clipboard content into quote, BibTeX and page."""
    return _default_parser.parse(clipboard)


def extract_cite_key(bibtex: str) -> str:
    """Return the sanitized cite key of a BibTeX record.

    Raises:
        MissingCiteKeyError: if the record does not start with ``@type{key,``.
    """
    return _default_parser.extract_cite_key(bibtex)


def extract_page_number(text: str) -> PageExtraction:
    """Strip a trailing page marker such as ``(p. 42)`` or ``pp. 10-15``."""
    return _default_parser.extract_page_number(text)


def extract_pages_from_bibtex(bibtex: str) -> Optional[str]:
    return _default_parser.extract_pages(bibtex)


def extract_book_title(bibtex: str) -> Optional[str]:
    return _default_parser.extract_title(bibtex)
