"""FastAPI + Tailwind interface for the RIS to BibTeX converter.

Run with:
    uvicorn ris2bibtex.web:app --reload
"""
from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response

from .app import RisConverterApp
from .exporters import to_bibtex

logger = logging.getLogger(__name__)

app = FastAPI(title="RIS to BibTeX", description="Convert RIS citations from the browser")

converter = RisConverterApp()


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>RIS to BibTeX</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">RIS to BibTeX</h1>
                <p class=\"text-gray-600 mt-2\">Paste RIS records or upload a .ris export to get BibTeX entries for LaTeX.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(bibtex: str | None = None, entry_count: int | None = None) -> str:
    """Render the landing page with optional conversion output."""

    file_form = """
    <form action=\"/convert-file\" method=\"post\" enctype=\"multipart/form-data\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Upload RIS</h2>
        <p class=\"text-gray-600 text-sm mb-3\">The converted .bib file is downloaded directly.</p>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"file\">RIS file</label>
        <input type=\"file\" name=\"file\" accept=\".ris,.txt\" required class=\"block w-full text-sm text-gray-800\" />
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Convert file</button>
    </form>
    """

    text_form = """
    <form action=\"/convert-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <h2 class=\"text-xl font-semibold text-gray-800\">Paste RIS Text</h2>
        <p class=\"text-gray-600 text-sm mb-3\">Each record must end with an <code>ER  -</code> line.</p>
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">RIS records</label>
        <textarea name=\"text\" required placeholder=\"TY  - JOUR&#10;AU  - Doe, Jane&#10;...&#10;ER  - \" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm font-mono\"></textarea>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Convert text</button>
    </form>
    """

    output_block = ""
    if bibtex is not None:
        output_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">BibTeX Output</h2>
            <p class=\"text-sm text-gray-600 mt-1\">Entries converted: {entry_count or 0}</p>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(bibtex)}</pre>
        </div>
        """

    return _layout(file_form + text_form + output_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the upload/text submission form."""

    return HTMLResponse(_form_page())


@app.post("/convert-text", response_class=HTMLResponse)
async def convert_text(text: str = Form(...)) -> HTMLResponse:
    """Convert pasted RIS text and show the BibTeX entries."""

    records = converter.process_text(text)
    return HTMLResponse(_form_page(to_bibtex(records), entry_count=len(records)))


@app.post("/convert-file")
async def convert_file(file: UploadFile = File(...)) -> Response:
    """Convert an uploaded RIS file and return it as a .bib attachment."""

    payload = await file.read()
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Rejected non UTF-8 upload %s: %s", file.filename, exc)
        raise HTTPException(status_code=400, detail="RIS files must be UTF-8 encoded") from exc

    bibtex = converter.bibtex_for_text(text)
    filename = f"{Path(file.filename or 'references').stem or 'references'}.bib"
    return Response(
        content=bibtex,
        media_type="text/x-bibtex",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("ris2bibtex.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
