"""
CiteGen - Flask Application
Provides the citation generator API.

Endpoints:
- GET  /api/styles              - Available citation styles
- GET  /api/source-types        - Source types and their fields
- POST /api/format              - Format one citation (manual or AI)
- POST /api/extract/url         - Extract metadata from a URL and format it
- POST /upload                  - Upload a document, extract metadata and format it
- GET  /api/citations           - List the session's citations
- POST /api/citations           - Format a citation and add it to the session
- POST /api/citations/generated - Add an already formatted citation
- DELETE /api/citations/<id>    - Remove a citation
- POST /api/citations/render    - Render every stored citation in a style
- POST /api/convert             - Convert formatted citations between styles (AI)
- GET  /api/export              - Download the bibliography (.txt or .docx)
- POST /reset                   - Clear session state
- GET  /health                  - Health check
"""

import io
import logging
import uuid
from datetime import datetime, timezone

from flask import Flask, current_app, jsonify, request, send_file, session
from werkzeug.utils import secure_filename

from .collection import CitationCollection
from .config import DEBUG, MAX_CONTENT_LENGTH, PORT, SECRET_KEY
from .documents import is_supported, read_document_text
from .exceptions import (
    CitationNotFoundError, CiteGenError, DocumentReadError, GenerationError,
    UnknownVariantError, ValidationError,
)
from .extractors import extract_from_document_text, extract_from_url
from .models import (
    CITATION_STYLE_NAMES, FIELDS_BY_SOURCE_TYPE, Citation, CitationStyle, SourceType,
)
from .strategies import AIStrategy, CitationStrategy, ManualStrategy
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = SECRET_KEY
app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH
app.config['CITEGEN_GENERATOR'] = None  # (prompt) -> text; None means Gemini

# =============================================================================
# IN-MEMORY SESSION STORAGE
# =============================================================================

_sessions = {}


def get_session_data():
    """Get or create session data for current user."""
    session_id = session.get('session_id')
    if not session_id or session_id not in _sessions:
        session_id = str(uuid.uuid4())
        session['session_id'] = session_id
        _sessions[session_id] = {
            'citations': CitationCollection(),
        }
    return _sessions[session_id]


def clear_session_data():
    """Clear current session data."""
    session_id = session.get('session_id')
    if session_id and session_id in _sessions:
        _sessions[session_id]['citations'].clear()
        del _sessions[session_id]
    session.pop('session_id', None)


def get_collection() -> CitationCollection:
    return get_session_data()['citations']


# =============================================================================
# HELPERS
# =============================================================================

def _json_body() -> dict:
    return request.get_json(silent=True) or {}


def _strategy(data: dict) -> CitationStrategy:
    if data.get('use_ai'):
        return AIStrategy(current_app.config.get('CITEGEN_GENERATOR'))
    return ManualStrategy()


def _style(data: dict, key: str = 'style') -> CitationStyle:
    return CitationStyle.from_string(data.get(key) or CitationStyle.APA.value)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.errorhandler(UnknownVariantError)
@app.errorhandler(ValidationError)
@app.errorhandler(DocumentReadError)
def handle_bad_request(e):
    return jsonify({'success': False, 'error': str(e)}), 400


@app.errorhandler(CitationNotFoundError)
def handle_not_found(e):
    return jsonify({'success': False, 'error': str(e)}), 404


@app.errorhandler(GenerationError)
def handle_generation_error(e):
    logger.error("AI generation failed: %s", e)
    return jsonify({'success': False, 'error': f"Failed to generate citation: {e}"}), 502


@app.errorhandler(CiteGenError)
def handle_citegen_error(e):
    logger.exception("Unhandled citegen error")
    return jsonify({'success': False, 'error': str(e)}), 500


# =============================================================================
# REFERENCE DATA
# =============================================================================

@app.route('/api/styles', methods=['GET'])
def api_styles():
    """Return available citation styles."""
    return jsonify({
        'styles': [
            {'value': style.value, 'name': name}
            for style, name in CITATION_STYLE_NAMES.items()
        ]
    })


@app.route('/api/source-types', methods=['GET'])
def api_source_types():
    """Return source types with the optional fields each one uses."""
    return jsonify({
        'source_types': [
            {'value': source_type.value, 'fields': list(fields)}
            for source_type, fields in FIELDS_BY_SOURCE_TYPE.items()
        ]
    })


# =============================================================================
# FORMATTING AND EXTRACTION
# =============================================================================

@app.route('/api/format', methods=['POST'])
def api_format():
    """
    Format a single citation without storing it.

    Request JSON:
        { "citation": {...}, "source_type": "book", "style": "apa", "use_ai": false }

    Response JSON:
        { "success": true, "citation": "Smith, John (2016). *Deep Work*. Grand Central." }
    """
    data = _json_body()
    source_type = SourceType.from_string(data.get('source_type') or SourceType.BOOK.value)
    formatted = _strategy(data).render(data.get('citation') or {}, source_type, _style(data))
    return jsonify({'success': True, 'citation': formatted})


@app.route('/api/extract/url', methods=['POST'])
def api_extract_url():
    """
    Extract metadata from a URL and format it.

    Request JSON:
        { "url": "https://example.com/some-page", "style": "mla", "use_ai": false }
    """
    data = _json_body()
    url = (data.get('url') or '').strip()
    if not url:
        raise ValidationError("Please enter a URL")

    style = _style(data)
    metadata = extract_from_url(url)
    formatted = _strategy(data).render_url(url, style)
    return jsonify({
        'success': True,
        'source_type': metadata.source_type.value,
        'metadata': metadata.to_dict(),
        'citation': formatted,
    })


@app.route('/upload', methods=['POST'])
def upload():
    """
    Upload a document and generate a citation from its contents.

    Request: FormData with 'file', optional 'style' and 'use_ai'
    """
    if 'file' not in request.files:
        raise ValidationError("No file provided")

    file = request.files['file']
    if not file.filename:
        raise ValidationError("No file selected")
    if not is_supported(file.filename):
        raise ValidationError("Please upload a TXT, MD, PDF, or DOCX file")

    filename = secure_filename(file.filename) or file.filename
    content = read_document_text(file.read(), filename)

    data = {
        'style': request.form.get('style'),
        'use_ai': request.form.get('use_ai', '').lower() in ('1', 'true', 'yes'),
    }
    style = _style(data)
    metadata = extract_from_document_text(content, filename)
    formatted = _strategy(data).render_document(content, filename, style)

    logger.info("Upload %s -> %s", filename, metadata.source_type.value)
    return jsonify({
        'success': True,
        'filename': filename,
        'source_type': metadata.source_type.value,
        'metadata': metadata.to_dict(),
        'citation': formatted,
    })


@app.route('/api/convert', methods=['POST'])
def api_convert():
    """
    Convert formatted citations from one style to another (AI only).

    Request JSON:
        { "text": "...", "source_style": "apa", "target_style": "mla" }
    """
    data = _json_body()
    strategy = AIStrategy(current_app.config.get('CITEGEN_GENERATOR'))
    converted = strategy.convert(
        data.get('text', ''),
        _style(data, 'source_style'),
        _style(data, 'target_style'),
    )
    return jsonify({'success': True, 'citations': converted})


# =============================================================================
# SESSION CITATIONS
# =============================================================================

@app.route('/api/citations', methods=['GET'])
def list_citations():
    return jsonify({'success': True, 'citations': get_collection().to_list()})


@app.route('/api/citations', methods=['POST'])
def add_citation():
    """
    Format a citation and add it to the session's list.

    Request JSON:
        { "citation": {...}, "source_type": "journal", "style": "apa", "use_ai": false }
    """
    data = _json_body()
    fields = data.get('citation') or {}
    draft = Citation.from_dict(fields, id_factory=lambda: "")
    if not draft.has_minimum_data():
        raise ValidationError("Please fill in at least the title and author(s)")

    source_type = SourceType.from_string(data.get('source_type') or SourceType.BOOK.value)
    citation = get_collection().generate(draft, source_type, _style(data), _strategy(data))
    return jsonify({'success': True, 'citation': citation.to_dict()}), 201


@app.route('/api/citations/generated', methods=['POST'])
def add_generated_citation():
    """Store an auto-generated citation string under a style."""
    data = _json_body()
    text = (data.get('text') or '').strip()
    if not text:
        raise ValidationError("No citation text provided")
    citation = get_collection().add_generated(text, _style(data), data.get('label', ''))
    return jsonify({'success': True, 'citation': citation.to_dict()}), 201


@app.route('/api/citations/<citation_id>', methods=['DELETE'])
def delete_citation(citation_id):
    get_collection().remove(citation_id)
    return jsonify({'success': True})


@app.route('/api/citations/render', methods=['POST'])
def render_citations():
    """Render every stored citation in a style (skips ones already rendered)."""
    data = _json_body()
    collection = get_collection()
    count = collection.render_all(_style(data), _strategy(data), bool(data.get('overwrite')))
    return jsonify({'success': True, 'rendered': count, 'citations': collection.to_list()})


@app.route('/api/export', methods=['GET'])
def export():
    """
    Download the bibliography for one style.

    Query: ?style=apa&format=txt|docx
    """
    style = _style(request.args)
    fmt = request.args.get('format', 'txt').lower()
    collection = get_collection()

    if fmt == 'docx':
        return send_file(
            io.BytesIO(collection.export_docx(style)),
            mimetype='application/vnd.openxmlformats-officedocument.wordprocessingml.document',
            as_attachment=True,
            download_name=collection.export_filename(style, 'docx'),
        )
    if fmt != 'txt':
        raise ValidationError(f"Unsupported export format: {fmt}")

    return send_file(
        io.BytesIO(collection.export_bibliography(style).encode('utf-8')),
        mimetype='text/plain',
        as_attachment=True,
        download_name=collection.export_filename(style),
    )


@app.route('/reset', methods=['POST'])
def reset():
    """Clear session state and start fresh."""
    clear_session_data()
    return jsonify({'success': True})


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


# =============================================================================
# MAIN
# =============================================================================

def main():
    setup_logging(logging.DEBUG if DEBUG else logging.INFO)
    app.run(host='0.0.0.0', port=PORT, debug=DEBUG)


if __name__ == '__main__':
    main()
