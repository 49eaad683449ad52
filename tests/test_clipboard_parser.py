import pytest

from logos_refs.clipboard_parser import (
    ClipboardParser,
    MissingCiteKeyError,
    extract_book_title,
    extract_cite_key,
    extract_page_number,
    extract_pages_from_bibtex,
    parse_logos_clipboard,
)
from logos_refs.normalization import sanitize_cite_key


def test_parse_splits_quote_bibtex_and_page(logos_clipboard):
    result = parse_logos_clipboard(logos_clipboard)
    assert result.main_text == "This is a quote from the book."
    assert "@book{smith2020" in result.bibtex
    assert "pages" not in result.bibtex
    assert result.page == "123"


def test_parse_without_pages_field():
    clipboard = "Quote text\n@book{doe2021,\n  author = {Jane Doe},\n  title = {Biblical Studies},\n}"
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "Quote text"
    assert result.page is None
    assert result.bibtex == clipboard.split("\n", 1)[1]


def test_parse_keeps_multi_line_quotes():
    clipboard = (
        "First line of quote.\nSecond line of quote.\nThird line.\n"
        "@article{author2022,\n  title = {Article Title},\n}"
    )
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "First line of quote.\nSecond line of quote.\nThird line."
    assert result.bibtex.startswith("@article{author2022")


def test_parse_leaves_markdown_in_quote():
    clipboard = "This is a *quote* with **bold** text.\n@book{smith2020, title = {Systematic Theology}, pages = {123},}"
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "This is a *quote* with **bold** text."


def test_parse_bibtex_only_clipboard():
    result = parse_logos_clipboard("  @book{citation2023, title={Only Citation}, pages = {7}}  ")
    assert result.main_text == ""
    assert result.bibtex.startswith("@book{citation2023")
    assert result.page == "7"


def test_parse_splits_on_space_before_marker():
    result = parse_logos_clipboard("Text result @book{citation2023, title={Only Citation}}")
    assert result.main_text == "Text result"
    assert result.bibtex == "@book{citation2023, title={Only Citation}}"


def test_parse_without_marker_returns_trimmed_text():
    result = parse_logos_clipboard("  just a quote, no citation @ all {here}  ")
    assert result.main_text == "just a quote, no citation @ all {here}"
    assert result.bibtex == ""
    assert result.page is None


def test_parse_empty_input():
    result = parse_logos_clipboard("")
    assert result.main_text == ""
    assert result.bibtex == ""
    assert result.page is None


def test_parse_uses_last_marker_when_quote_mentions_one():
    clipboard = (
        "Email me @home{ later } about this.\n"
        "@book{smith2020, title = {Systematic Theology}, pages = {9}}"
    )
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "Email me @home{ later } about this."
    assert result.bibtex.startswith("@book{smith2020")
    assert result.page == "9"


def test_parse_splits_at_trailing_marker_after_record():
    # Known limitation: a marker-shaped token after the record wins the split.
    clipboard = "Quote.\n@book{smith2020, title = {T}} see @misc{x}"
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "Quote.\n@book{smith2020, title = {T}} see"
    assert result.bibtex == "@misc{x}"


def test_parse_removes_resource_link_from_quote():
    clipboard = (
        "A quote worth keeping (Resource Link: https://ref.ly/logosres/sysrev?ref=Page.p_12)\n"
        "@book{grudem1994, title = {Systematic Theology}, pages = {12}}"
    )
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "A quote worth keeping"
    assert result.refly_link == "https://ref.ly/logosres/sysrev?ref=Page.p_12"
    assert result.page == "12"


def test_parse_removes_bare_resource_link():
    clipboard = "Quote https://ref.ly/o/esv/123 text\n@book{k, title = {T}}"
    result = parse_logos_clipboard(clipboard)
    assert result.main_text == "Quote  text"
    assert result.refly_link == "https://ref.ly/o/esv/123"


def test_parse_handles_quoted_pages_value():
    result = parse_logos_clipboard('Quote\n@book{k, title = {T}, pages = "45--47",\n}')
    assert result.page == "45--47"
    assert "pages" not in result.bibtex


def test_cleaned_record_has_no_pages_left():
    parser = ClipboardParser()
    record = "@book{test,\n  pages = {1-2},\n  title = {Book},\n  PAGES = {3}\n}"
    cleaned = parser.strip_pages_field(record)
    assert extract_pages_from_bibtex(record) == "1-2"
    assert extract_pages_from_bibtex(cleaned) is None


def test_extract_cite_key_from_book_and_article():
    assert extract_cite_key("@book{smith2020, title = {Test}}") == "smith2020"
    assert extract_cite_key("@article{jones-theology-2019, author = {Jones}}") == "jones-theology-2019"


def test_extract_cite_key_sanitizes_underscores():
    key = extract_cite_key("@book{author_name__2020, title = {Test}}")
    assert key == "author-name-2020"
    assert "_" not in key
    assert "--" not in key


def test_extract_cite_key_strips_edge_hyphens():
    assert extract_cite_key("@book{_lead: trail!_, title = {Test}}") == "lead-trail"


def test_sanitize_cite_key_is_idempotent():
    for raw in ["author_name__2020", "a--b", "x.y:z", "plain"]:
        once = sanitize_cite_key(raw)
        assert sanitize_cite_key(once) == once


@pytest.mark.parametrize("record", ["invalid content", "", "  @book{key, x}", "@book{___, title = {T}}"])
def test_extract_cite_key_raises_without_header(record):
    with pytest.raises(MissingCiteKeyError, match="Could not extract cite key"):
        extract_cite_key(record)


def test_missing_cite_key_is_value_error():
    with pytest.raises(ValueError):
        extract_cite_key("nothing here")


def test_extract_page_number_single_page():
    result = extract_page_number("Some text (p. 42)")
    assert result.page == "p. 42"
    assert result.cleaned_text == "Some text"


def test_extract_page_number_range_and_brackets():
    assert extract_page_number("Quote text (pp. 10-15)").page == "pp. 10-15"
    result = extract_page_number("Quote text [P 7].")
    assert result.page == "P 7"
    assert result.cleaned_text == "Quote text"


def test_extract_page_number_en_dash():
    result = extract_page_number("Text p. 100–105")
    assert result.page == "p. 100–105"
    assert result.cleaned_text == "Text"


def test_extract_page_number_absent():
    result = extract_page_number("  Just some regular text ")
    assert result.page is None
    assert result.cleaned_text == "Just some regular text"


def test_extract_pages_from_bibtex_variants():
    assert extract_pages_from_bibtex("@book{test, pages = {123-456}, title = {Book}}") == "123-456"
    assert extract_pages_from_bibtex("@book{test, Pages = '9', title = {Book}}") == "9"
    assert extract_pages_from_bibtex("@book{test, title = {Book}}") is None


def test_extract_book_title():
    bibtex = "@book{test, title = {Systematic Theology: An Introduction}}"
    assert extract_book_title(bibtex) == "Systematic Theology: An Introduction"
    assert extract_book_title("@misc{test, TITLE = {Upper}}") == "Upper"
    assert extract_book_title("@misc{test, author = {Someone}}") is None


def test_parse_ignores_fields_ending_in_pages():
    result = parse_logos_clipboard(
        "Quote.\n@book{k,\n  numpages = {300},\n  pages = {12},\n  title = {T},\n}"
    )
    assert result.page == "12"
    assert "numpages = {300}" in result.bibtex
    assert "title = {T}" in result.bibtex
    assert extract_pages_from_bibtex("@book{k, numpages = {300}}") is None
