"""
citegen/documents.py

Word/text document handling for the citation generator.

Features:
- Reading uploaded .txt / .md / .docx files into plain text for extraction
- Writing a bibliography to .docx with *asterisk* italics as italic runs
"""

import io
import logging
import os
import re
import zipfile
from typing import Iterable, Optional

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.shared import Pt

from .config import MAX_SCAN_CHARS
from .exceptions import DocumentReadError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = ('.txt', '.md')
DOCX_EXTENSIONS = ('.docx',)
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS + DOCX_EXTENSIONS + ('.pdf',)

ITALIC_SPLIT = re.compile(r'(\*[^*]+\*)')


def is_supported(filename: str) -> bool:
    return os.path.splitext(filename or "")[1].lower() in SUPPORTED_EXTENSIONS


def read_document_text(data: bytes, filename: str, limit: Optional[int] = MAX_SCAN_CHARS) -> str:
    """
    Turn an uploaded file into text for the metadata extractor.

    - .txt/.md: decoded as UTF-8, undecodable bytes replaced
    - .docx: paragraph text via python-docx
    - anything else (PDF included): a "[Document: name]" stand-in, so the
      extractor still works from the filename

    Raises:
        DocumentReadError: if a .docx file cannot be opened
    """
    ext = os.path.splitext(filename or "")[1].lower()

    if ext in TEXT_EXTENSIONS:
        text = data.decode('utf-8', errors='replace')
    elif ext in DOCX_EXTENSIONS:
        try:
            doc = Document(io.BytesIO(data))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise DocumentReadError(f"Could not open {filename}: {e}") from e
        text = "\n".join(p.text for p in doc.paragraphs if p.text)
    else:
        logger.info("No text reader for %r, using filename only", filename)
        return f"[Document: {filename}]"

    return text[:limit] if limit else text


def add_formatted_paragraph(doc, text: str):
    """Add a paragraph, rendering *asterisk* spans as italic runs."""
    para = doc.add_paragraph()
    for part in ITALIC_SPLIT.split(text):
        if not part:
            continue
        if part.startswith('*') and part.endswith('*') and len(part) > 2:
            para.add_run(part[1:-1]).italic = True
        else:
            para.add_run(part)
    return para


def bibliography_to_docx(entries: Iterable[str], title: Optional[str] = None) -> bytes:
    """
    Build a .docx bibliography, one paragraph per entry.

    Returns:
        The document as bytes
    """
    doc = Document()
    style = doc.styles['Normal']
    style.font.name = 'Times New Roman'
    style.font.size = Pt(12)

    if title:
        doc.add_heading(title, level=1)
    for entry in entries:
        add_formatted_paragraph(doc, entry)

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
