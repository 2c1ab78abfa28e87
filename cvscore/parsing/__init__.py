from .models import ExtractedText
from .parse import DocumentExtractionError, SUPPORTED_EXTENSIONS, extract_text, sanitize_extracted_text

__all__ = [
    "ExtractedText",
    "DocumentExtractionError",
    "SUPPORTED_EXTENSIONS",
    "extract_text",
    "sanitize_extracted_text",
]
