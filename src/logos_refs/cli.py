"""Command line interface for turning Logos clipboard text into notes."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .app import LogosReferenceApp
from .clipboard_parser import MissingCiteKeyError
from .config import PluginSettings, load_settings, save_settings
from .report import render_report

logger = logging.getLogger(__name__)


def _read_input(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return Path(value).read_text()


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse text copied from Logos into a note citation")
    parser.add_argument("input", help="Path to a file holding the clipboard text, or '-' for stdin")
    parser.add_argument(
        "--rich-input",
        type=Path,
        help="Markdown converted from the HTML clipboard flavour, used for the quote",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Plugin settings JSON (data.json); missing files fall back to defaults",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Write updated citation counters back to --settings",
    )
    parser.add_argument(
        "--translation",
        help="Bible translation for verse links (niv, esv, nasb, lsb, nlt)",
    )
    parser.add_argument(
        "--link-verses",
        action="store_true",
        help="Link scripture references in the quote to Logos",
    )
    parser.add_argument(
        "--no-retain-formatting",
        action="store_true",
        help="Ignore the rich input and keep underscore markup as copied",
    )
    parser.add_argument(
        "--parse-only",
        action="store_true",
        help="Only split the clipboard; do not require a cite key or render notes",
    )
    parser.add_argument(
        "--source-note",
        default="Untitled.md",
        help="Name of the note the citation is pasted into",
    )
    parser.add_argument(
        "--existing-note",
        type=Path,
        help="Existing reference note to append the citation to",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write the structured result to a JSON file",
    )
    parser.add_argument(
        "--note-output",
        type=Path,
        help="Write the reference note markdown to a file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings) if args.settings else PluginSettings()
    if args.translation:
        settings.bible_translation = args.translation
    if args.link_verses:
        settings.auto_detect_bible_verses = True
    if args.no_retain_formatting:
        settings.retain_formatting = False

    app = LogosReferenceApp(settings=settings)
    clipboard = _read_input(args.input)
    rich_text = args.rich_input.read_text() if args.rich_input else None

    if args.parse_only:
        parsed = app.parse(clipboard, rich_text=rich_text)
        if settings.auto_detect_bible_verses:
            parsed.main_text = app.link_verses(parsed.main_text)
        print(render_report(parsed))
        if args.json_output:
            args.json_output.write_text(json.dumps(parsed.to_dict(), indent=2))
        return 0

    existing_note = args.existing_note.read_text() if args.existing_note else None
    try:
        pasted = app.paste(
            clipboard,
            args.source_note,
            rich_text=rich_text,
            existing_note=existing_note,
        )
    except MissingCiteKeyError as exc:
        print(f"Error: {exc}. Copy the reference from Logos with BibTeX citation format.", file=sys.stderr)
        return 1

    print(render_report(pasted.parsed, pasted))

    if args.json_output:
        args.json_output.write_text(json.dumps(pasted.to_dict(), indent=2))

    if args.note_output:
        args.note_output.write_text(pasted.reference_note)

    if args.save_settings:
        if not args.settings:
            logger.warning("--save-settings needs --settings; counters were not saved")
        else:
            save_settings(settings, args.settings)

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
