"""Human-readable summaries of parsed clipboard content."""
from __future__ import annotations

from .models import ParsedClipboard, PastedReference


def render_report(parsed: ParsedClipboard, pasted: PastedReference | None = None) -> str:
    """Return a plain-text report of what was found in the clipboard."""

    lines = ["Logos Clipboard Report"]
    lines.append(f"Quote: {parsed.main_text or '(none)'}")
    lines.append(f"BibTeX record: {'found' if parsed.has_bibtex else 'missing'}")
    if parsed.page:
        lines.append(f"Page: {parsed.page}")
    if parsed.refly_link:
        lines.append(f"Resource link: {parsed.refly_link}")

    if pasted is None:
        return "\n".join(lines)

    lines.append(f"Cite key: {pasted.cite_key}")
    if pasted.book_title:
        lines.append(f"Title: {pasted.book_title}")
    lines.append(f"Reference note: {pasted.file_path}")
    lines.append(f"Block id: ^{pasted.block_id}")
    lines.append("")
    lines.append(pasted.callout.rstrip("\n"))
    return "\n".join(lines)
