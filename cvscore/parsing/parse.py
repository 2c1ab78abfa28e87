from __future__ import annotations

import logging
import re
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import ExtractedText

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("txt", "pdf", "docx")

# C0/C1 control characters except tab and newline, plus BOM and the replacement char.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f\ufeff\ufffd]")
_INLINE_SPACE_RE = re.compile(r"[ \t\u00a0]+")


class DocumentExtractionError(ValueError):
    pass


def sanitize_extracted_text(text: str) -> str:
    """Drop document-format artifacts so only plain text reaches the scorer."""
    unified = (text or "").replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
    cleaned = _CONTROL_CHARS_RE.sub("", unified)
    lines = [_INLINE_SPACE_RE.sub(" ", line).strip() for line in cleaned.split("\n")]
    return "\n".join(line for line in lines if line)


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _parse_txt(content: bytes) -> tuple[str, list[str]]:
    return content.decode("utf-8-sig", errors="replace"), []


def _parse_pdf(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
        if not text_parts:
            warnings.append("No extractable text found in PDF.")
        return "\n".join(text_parts), warnings
    except Exception as exc:
        warnings.append(f"PDF parsing failed: {exc}")
        return "", warnings


def _is_list_paragraph(paragraph) -> bool:
    style_name = paragraph.style.name if paragraph.style is not None else ""
    if style_name.startswith("List"):
        return True
    properties = paragraph._p.pPr
    return properties is not None and properties.numPr is not None


def _docx_paragraph_text(paragraph) -> str:
    text = paragraph.text.strip()
    # Word keeps list markers in numbering, not in the run text.
    if text and _is_list_paragraph(paragraph):
        return f"• {text}"
    return text


def _parse_docx(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    try:
        document = Document(BytesIO(content))
        paragraphs = [text for text in (_docx_paragraph_text(p) for p in document.paragraphs) if text]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text and cell.text.strip()]
                if cells:
                    paragraphs.append(" | ".join(cells))
        if not paragraphs:
            warnings.append("No extractable text found in DOCX.")
        return "\n".join(paragraphs), warnings
    except Exception as exc:
        warnings.append(f"DOCX parsing failed: {exc}")
        return "", warnings


def extract_text(filename: str, content: bytes) -> ExtractedText:
    extension = _extension(filename)
    if extension == "txt":
        text, warnings = _parse_txt(content)
    elif extension == "pdf":
        text, warnings = _parse_pdf(content)
    elif extension == "docx":
        text, warnings = _parse_docx(content)
    else:
        raise DocumentExtractionError(
            f"Unsupported file type '.{extension}'. Supported types: "
            + ", ".join(f".{ext}" for ext in SUPPORTED_EXTENSIONS)
        )

    for warning in warnings:
        logger.warning("document_extraction_warning file_type=%s: %s", extension, warning)

    return ExtractedText(
        filename=filename,
        source_type=extension,
        text=sanitize_extracted_text(text),
        warnings=warnings,
    )
