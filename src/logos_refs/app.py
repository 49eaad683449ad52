"""High-level orchestrator for pasting Logos references into notes."""
from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Iterable, Optional

from .clipboard_parser import ClipboardParser
from .config import PluginSettings
from .formatter import NoteFormatter
from .models import ParsedClipboard, PastedReference
from .normalization import clean_formatted_text
from .verse_linker import VerseLinker

logger = logging.getLogger(__name__)


class LogosReferenceApp:
    """Coordinates clipboard parsing, verse linking and note rendering."""

    def __init__(self, settings: PluginSettings | None = None):
        self.settings = settings or PluginSettings()
        self.parser = ClipboardParser()
        self.verse_linker = VerseLinker()
        self.formatter = NoteFormatter(self.settings)

    def parse(self, clipboard: str, rich_text: str | None = None) -> ParsedClipboard:
        """Parse plain clipboard text, preferring the rich quote when formatting is kept.

        ``rich_text`` is the HTML clipboard flavour converted to markdown. Only its
        quote is used; the record, page and link come from the plain text unless
        the plain text lacks them.
        """
        parsed = self.parser.parse(clipboard)
        if not self.settings.retain_formatting:
            return parsed

        if rich_text:
            rich = self.parser.parse(rich_text)
            parsed = ParsedClipboard(
                main_text=rich.main_text or parsed.main_text,
                bibtex=parsed.bibtex or rich.bibtex,
                page=parsed.page if parsed.page is not None else rich.page,
                refly_link=parsed.refly_link or rich.refly_link,
            )
        parsed.main_text = clean_formatted_text(parsed.main_text)
        return parsed

    def paste(
        self,
        clipboard: str,
        source_note: str,
        rich_text: str | None = None,
        existing_note: str | None = None,
    ) -> PastedReference:
        """Build the callout and reference note text for one paste.

        Raises:
            MissingCiteKeyError: when the clipboard carries no usable BibTeX
                record. Nothing is rendered and no counter is touched.
        """
        parsed = self.parse(clipboard, rich_text=rich_text)
        cite_key = self.parser.extract_cite_key(parsed.bibtex)
        book_title = self.parser.extract_title(parsed.bibtex)

        main_text = parsed.main_text
        if self.settings.auto_detect_bible_verses:
            main_text = self.verse_linker.link(main_text, self.settings.bible_translation)

        note_name = self.formatter.note_name(cite_key, book_title)
        file_path = self.formatter.file_path(note_name)
        block_id = self.formatter.next_block_id(cite_key, PurePosixPath(source_note).name)
        alias = self.formatter.link_alias(cite_key, note_name, parsed.page)
        callout = self.formatter.callout(
            main_text, file_path, alias, block_id, refly_link=parsed.refly_link
        )
        link_back = self.formatter.link_back(source_note, block_id, parsed.page)

        if existing_note is None:
            reference_note = self.formatter.reference_note(parsed.bibtex, link_back)
            logger.info("Rendered new reference note %s", file_path)
        else:
            reference_note = self.formatter.append_citation(existing_note, link_back)
            logger.info("Appended citation %s to %s", block_id, file_path)

        return PastedReference(
            cite_key=cite_key,
            book_title=book_title,
            note_name=note_name,
            file_path=file_path,
            block_id=block_id,
            page=parsed.page,
            callout=callout,
            link_back=link_back,
            reference_note=reference_note,
            parsed=parsed,
        )

    def link_verses(self, text: str, translation: str | None = None) -> str:
        return self.verse_linker.link(text, translation or self.settings.bible_translation)

    def bibliography(self, note_texts: Iterable[str]) -> Optional[str]:
        return self.formatter.bibliography(note_texts)

    def append_bibliography(self, document: str, note_texts: Iterable[str]) -> Optional[str]:
        """Return ``document`` with a bibliography appended, or None when no BibTeX was found."""
        section = self.bibliography(note_texts)
        if section is None:
            return None
        return f"{document}\n\n{section}"
