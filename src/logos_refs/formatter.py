"""Rendering of callout blocks and reference notes for pasted citations."""
from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Iterable, List, Optional

from .clipboard_parser import ClipboardParser
from .config import PluginSettings


class NoteFormatter:
    """Render the markdown written into the source note and the reference note.

    Nothing here touches the vault; callers decide where the text goes.
    """

    NOTE_NAME_FORBIDDEN = re.compile(r"[\\/:]")
    CITATIONS_HEADING = "## Citations"
    CITATIONS_SECTION = re.compile(r"## Citations([\s\S]*?)((?:\n#+\s)|\Z)")
    BIBTEX_BLOCK = re.compile(r"```bibtex[\s\S]*?```")

    def __init__(self, settings: PluginSettings | None = None):
        self.settings = settings or PluginSettings()
        self.parser = ClipboardParser()

    def note_name(self, cite_key: str, book_title: str | None = None) -> str:
        name = cite_key
        if self.settings.append_references_to_title and book_title:
            name = f"{book_title} - References"
        return self.NOTE_NAME_FORBIDDEN.sub("", name)

    def file_path(self, note_name: str) -> str:
        folder = self.settings.bib_folder
        return f"{folder}/{note_name}.md" if folder else f"{note_name}.md"

    @staticmethod
    def page_label(page: str | None) -> str:
        if not page:
            return ""
        prefix = "pp." if "-" in page or "–" in page else "p."
        return f", {prefix} {page}"

    def link_alias(self, cite_key: str, note_name: str, page: str | None) -> str:
        base = note_name if self.settings.append_references_to_title else cite_key
        return f"{base}{self.page_label(page)}"

    def next_block_id(self, cite_key: str, source_note: str) -> str:
        """Bump the per-note citation counter and return the block id."""
        counters = self.settings.citation_counters
        counters[source_note] = counters.get(source_note, 0) + 1
        return f"{cite_key.replace(' ', '-', 1)}-{counters[source_note]}"

    def callout(
        self,
        main_text: str,
        link_target: str,
        alias: str,
        block_id: str,
        refly_link: str | None = None,
    ) -> str:
        lines = [
            f"> [!logos] {self.settings.callout_title}",
            "> " + "\n> ".join(main_text.split("\n")),
        ]
        if self.settings.add_new_line_before_link:
            lines.append("> ")
        if self.settings.include_refly_link and refly_link:
            lines.append(f"> [Open in Logos]({refly_link})")
        lines.append(f"> [[{link_target}|{alias}]] ^{block_id}")
        text = "\n".join(lines) + "\n"
        if self.settings.add_new_line_after_callout:
            text += "\n"
        return text

    @staticmethod
    def link_back(source_note: str, block_id: str, page: str | None = None) -> str:
        basename = PurePosixPath(source_note).stem
        suffix = f" → p. {page}" if page else ""
        return f"[[{basename}#^{block_id}]]{suffix}"

    def citation_line(self, link_back: str) -> str:
        prefix = "\n" if self.settings.add_new_line_before_link else ""
        return f"{prefix}- {link_back}"

    def metadata_frontmatter(self) -> str:
        names = self.settings.custom_metadata_fields
        if not self.settings.use_custom_metadata or not names:
            return ""
        body = "".join(f"{name}: \n" for name in names)
        return f"---\n{body}---\n\n"

    def reference_note(self, bibtex: str, link_back: str) -> str:
        """Content of a brand new reference note for a BibTeX record."""
        return self.metadata_frontmatter() + "\n".join(
            [
                "```bibtex",
                self.parser.strip_pages_field(bibtex),
                "```",
                "",
                self.CITATIONS_HEADING,
                self.citation_line(link_back),
            ]
        )

    def append_citation(self, note_text: str, link_back: str) -> str:
        """Add a citation line to an existing reference note.

        The line goes at the end of the ``## Citations`` section, which is
        created when missing. A link-back already listed there is not repeated.
        """
        line = self.citation_line(link_back)
        if self.CITATIONS_HEADING not in note_text:
            return f"{note_text.strip()}\n\n{self.CITATIONS_HEADING}\n{line}"

        def _extend(match: re.Match) -> str:
            if link_back in match.group(0):
                return match.group(0)
            citations, following = match.group(1), match.group(2)
            return f"{self.CITATIONS_HEADING}\n{citations.strip()}\n{line}\n{following}"

        return self.CITATIONS_SECTION.sub(_extend, note_text, count=1)

    def extract_bibtex_block(self, note_text: str) -> Optional[str]:
        match = self.BIBTEX_BLOCK.search(note_text)
        if not match:
            return None
        return match.group(0).replace("```bibtex", "").replace("```", "").strip()

    def bibliography(self, note_texts: Iterable[str]) -> Optional[str]:
        """Collect the BibTeX blocks of linked notes into a bibliography section."""
        entries: List[str] = []
        for text in note_texts:
            block = self.extract_bibtex_block(text)
            if block:
                entries.append(block)
        if not entries:
            return None
        return "## Bibliography\n" + "\n\n".join(entries)
