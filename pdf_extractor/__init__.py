"""
PDF Extractor - plain text extraction from uploaded PDF documents

Pulls the embedded text layer out of a PDF byte stream with PyMuPDF so it
can be fitted into an LLM prompt. Scanned, image-only PDFs are rejected:
no OCR is performed.

Quick Start:
    from pdf_extractor import TextExtractor, DocumentProcessingError

    extractor = TextExtractor()
    if extractor.is_supported_type(upload.content_type):
        try:
            text = extractor.extract_text(upload.file)
        except DocumentProcessingError as e:
            print(f"Could not extract text from this file: {e}")
"""

__version__ = "2.1.0"

from .exceptions import (
    DocumentProcessingError,
    ExtractionCancelledError,
    NoTextLayerError,
    PDFCorruptedError,
    PDFEncryptedError,
    PDFError,
    UnsupportedDocumentTypeError,
    format_error_chain,
)
from .models import ExtractedPage, ExtractionResult, RawDocument
from .text_extractor import (
    DEFAULT_SUPPORTED_TYPES,
    TextExtractor,
    extract_text,
    is_supported_type,
)

__all__ = [
    "__version__",
    "TextExtractor",
    "DEFAULT_SUPPORTED_TYPES",
    "extract_text",
    "is_supported_type",
    "RawDocument",
    "ExtractedPage",
    "ExtractionResult",
    "DocumentProcessingError",
    "UnsupportedDocumentTypeError",
    "PDFError",
    "PDFCorruptedError",
    "PDFEncryptedError",
    "NoTextLayerError",
    "ExtractionCancelledError",
    "format_error_chain",
]
