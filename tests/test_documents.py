"""Tests for reading uploads and writing .docx bibliographies."""

import io

import pytest
from docx import Document

from citegen.config import MAX_SCAN_CHARS
from citegen.documents import (
    add_formatted_paragraph, bibliography_to_docx, is_supported, read_document_text,
)
from citegen.exceptions import DocumentReadError


def docx_bytes(*paragraphs):
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestReadDocumentText:

    def test_supported_extensions(self):
        assert is_supported("notes.TXT")
        assert is_supported("paper.pdf")
        assert is_supported("thesis.docx")
        assert not is_supported("image.png")
        assert not is_supported("")

    def test_text_file(self):
        assert read_document_text("Written by Jane Doe".encode("utf-8"), "notes.md") == (
            "Written by Jane Doe"
        )

    def test_undecodable_bytes_replaced(self):
        assert read_document_text(b"ok \xff", "notes.txt") == "ok \ufffd"

    def test_capped(self):
        data = b"a" * (MAX_SCAN_CHARS + 100)
        assert len(read_document_text(data, "notes.txt")) == MAX_SCAN_CHARS
        assert len(read_document_text(data, "notes.txt", limit=None)) == MAX_SCAN_CHARS + 100

    def test_docx(self):
        data = docx_bytes("Deep Learning Handbook", "", "Written by Jane Doe")
        assert read_document_text(data, "handbook.docx") == "Deep Learning Handbook\nWritten by Jane Doe"

    def test_corrupt_docx(self):
        with pytest.raises(DocumentReadError):
            read_document_text(b"not a zip file", "broken.docx")

    def test_pdf_placeholder(self):
        assert read_document_text(b"%PDF-1.4", "paper.pdf") == "[Document: paper.pdf]"


class TestDocxWriter:

    def test_italic_runs(self):
        doc = Document()
        para = add_formatted_paragraph(doc, "Smith (2016). *Deep Work*. Grand Central.")
        runs = [(r.text, bool(r.italic)) for r in para.runs]
        assert runs == [
            ("Smith (2016). ", False),
            ("Deep Work", True),
            (". Grand Central.", False),
        ]

    def test_bibliography(self):
        data = bibliography_to_docx(["First *A*.", "Second."], title="Bibliography")
        doc = Document(io.BytesIO(data))
        assert [p.text for p in doc.paragraphs] == ["Bibliography", "First A.", "Second."]
        assert doc.styles["Normal"].font.name == "Times New Roman"

    def test_no_title(self):
        doc = Document(io.BytesIO(bibliography_to_docx(["Only."])))
        assert [p.text for p in doc.paragraphs] == ["Only."]
