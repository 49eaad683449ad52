import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


@pytest.fixture()
def logos_clipboard() -> str:
    """Clipboard text as Logos copies it with the BibTeX citation style."""

    return (
        "This is a quote from the book.\n"
        "@book{smith2020,\n"
        "  author = {John Smith},\n"
        "  title = {Systematic Theology},\n"
        "  pages = {123},\n"
        "}"
    )


@pytest.fixture()
def clipboard_file(tmp_path: Path, logos_clipboard: str) -> Path:
    path = tmp_path / "clipboard.txt"
    path.write_text(logos_clipboard)
    return path
