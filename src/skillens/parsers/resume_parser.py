import codecs
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PDF = "pdf"
DOCX = "docx"
TEXT = "text"

CONTENT_TYPES: dict[str, str] = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "text/plain": TEXT,
    "text/markdown": TEXT,
    "text/x-markdown": TEXT,
}

SUFFIXES: dict[str, str] = {
    ".pdf": PDF,
    ".docx": DOCX,
    ".txt": TEXT,
    ".md": TEXT,
}

SUPPORTED_SUFFIXES = tuple(SUFFIXES)


class ExtractionError(ValueError):
    """Raised when a document cannot be turned into plain text."""


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return its plain text."""
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExtractionError(f"Cannot read {path}: {exc}") from exc
    return extract_text(data, filename=path.name)


def extract_text(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
) -> str:
    """Extract plain text from document bytes.

    The media type comes from ``content_type`` when it is one we know,
    otherwise from the filename suffix, otherwise from the leading bytes.
    Raises ExtractionError for empty, unsupported or unreadable input.
    """
    if not data:
        raise ExtractionError("Empty file")

    kind = detect_kind(data, filename, content_type)
    if kind is None:
        suffix = Path(filename).suffix if filename else ""
        raise ExtractionError(
            f"Unsupported file format: {suffix or content_type or 'unknown'}"
        )
    logger.debug("Extracting %s text from %s (%d bytes)", kind, filename or "upload", len(data))

    if kind == TEXT:
        return _parse_text(data)
    try:
        if kind == PDF:
            return _parse_pdf(data)
        return _parse_docx(data)
    except Exception as exc:
        raise ExtractionError(f"Could not read {kind.upper()} document: {exc}") from exc


def detect_kind(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
) -> str | None:
    """Resolve the document kind, or None if it is not supported."""
    if content_type:
        kind = CONTENT_TYPES.get(content_type.split(";")[0].strip().lower())
        if kind:
            return kind
    if filename:
        suffix = Path(filename).suffix.lower()
        if suffix:
            return SUFFIXES.get(suffix)
    if data.startswith(b"%PDF"):
        return PDF
    if data.startswith(b"PK\x03\x04"):
        return DOCX
    return None


def _parse_text(data: bytes) -> str:
    """Decode text as-is; UTF-16 only when the file starts with its BOM."""
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encoding = "utf-16"
    else:
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ExtractionError(f"Text is not valid {encoding.upper()}: {exc}") from exc


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        return "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def _parse_docx(data: bytes) -> str:
    from io import BytesIO

    from docx import Document

    doc = Document(BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
