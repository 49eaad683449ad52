"""FastAPI + Tailwind interface for parsing Logos clipboard text.

Run with:
    uvicorn logos_refs.web:app --reload
"""
from __future__ import annotations

from typing import Any, Dict, Optional
from xml.sax.saxutils import escape

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .app import LogosReferenceApp
from .clipboard_parser import MissingCiteKeyError
from .config import SUPPORTED_TRANSLATIONS, PluginSettings
from .report import render_report

app = FastAPI(title="Logos References", description="Turn Logos clipboard text into note citations")


class ParseRequest(BaseModel):
    text: str
    rich_text: Optional[str] = None
    retain_formatting: bool = True


class LinkVersesRequest(BaseModel):
    text: str
    translation: str = "esv"


class PasteRequest(BaseModel):
    text: str
    source_note: str = "Untitled.md"
    rich_text: Optional[str] = None
    existing_note: Optional[str] = None
    settings: Dict[str, Any] = {}


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>Logos References</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">Logos References</h1>
                <p class=\"text-gray-600 mt-2\">Paste text copied from Logos with a BibTeX citation to preview the callout and reference note.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(report: str | None = None, error: str | None = None, translation: str = "esv") -> str:
    """Render the landing page with an optional report or error message."""

    options = "".join(
        f"<option value=\"{key}\" {'selected' if key == translation else ''}>{label}</option>"
        for key, label in SUPPORTED_TRANSLATIONS.items()
    )

    text_form = f"""
    <form action=\"/paste-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Paste Clipboard Text</h2>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">Clipboard text</label>
        <textarea name=\"text\" required placeholder=\"Quote followed by @book{{...}}\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm\"></textarea>
        <div class=\"flex items-center gap-2 mt-3\">
            <input type=\"checkbox\" id=\"link_verses\" name=\"link_verses\" value=\"1\" class=\"h-4 w-4 text-indigo-600 border-gray-300 rounded\" />
            <label for=\"link_verses\" class=\"text-sm text-gray-700\">Link Bible verses to Logos</label>
            <select name=\"translation\" class=\"ml-4 border border-gray-300 rounded-md text-sm\">{options}</select>
        </div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Preview</button>
    </form>
    """

    report_block = ""
    if report:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Clipboard Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    error_block = ""
    if error:
        error_block = f"""
        <div class=\"mt-8 bg-red-50 border border-red-200 text-red-800 rounded-lg p-4\">{escape(error)}</div>
        """

    return _layout(text_form + error_block + report_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the paste form."""

    return HTMLResponse(_form_page())


@app.post("/paste-text", response_class=HTMLResponse)
async def paste_text(
    text: str = Form(...),
    link_verses: bool = Form(False),
    translation: str = Form("esv"),
) -> HTMLResponse:
    """Preview the callout produced for pasted clipboard text."""

    settings = PluginSettings(auto_detect_bible_verses=link_verses, bible_translation=translation)
    checker = LogosReferenceApp(settings=settings)
    try:
        pasted = checker.paste(text, "Untitled.md")
    except MissingCiteKeyError as exc:
        parsed = checker.parse(text)
        return HTMLResponse(
            _form_page(render_report(parsed), error=str(exc), translation=translation),
            status_code=422,
        )
    return HTMLResponse(_form_page(render_report(pasted.parsed, pasted), translation=translation))


@app.post("/api/parse")
async def parse_clipboard(request: ParseRequest) -> Dict[str, Any]:
    settings = PluginSettings(retain_formatting=request.retain_formatting)
    parsed = LogosReferenceApp(settings=settings).parse(request.text, rich_text=request.rich_text)
    return parsed.to_dict()


@app.post("/api/link-verses")
async def link_verses_api(request: LinkVersesRequest) -> Dict[str, str]:
    return {"text": LogosReferenceApp().link_verses(request.text, request.translation)}


@app.post("/api/paste")
async def paste_clipboard(request: PasteRequest) -> Dict[str, Any]:
    try:
        settings = PluginSettings.from_dict(request.settings)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    checker = LogosReferenceApp(settings=settings)
    try:
        pasted = checker.paste(
            request.text,
            request.source_note,
            rich_text=request.rich_text,
            existing_note=request.existing_note,
        )
    except MissingCiteKeyError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    result = pasted.to_dict()
    result["settings"] = checker.settings.to_dict()
    return result


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("logos_refs.web:app", host="127.0.0.1", port=8000, reload=False)


__all__ = ["app", "main"]
