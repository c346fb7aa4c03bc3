"""
Custom Exceptions for Document Text Extraction.

This module defines a hierarchy of exceptions for precise error handling
when turning uploaded documents into plain text. Every error here is a
user-facing validation failure ("could not extract text from this file"),
never a crash.

Exception Hierarchy:
    DocumentProcessingError (base)
    ├── UnsupportedDocumentTypeError
    ├── PDFError
    │   ├── PDFCorruptedError
    │   ├── PDFEncryptedError
    │   └── NoTextLayerError
    └── ExtractionCancelledError

Usage:
    from pdf_extractor.exceptions import (
        DocumentProcessingError,
        NoTextLayerError,
    )

    try:
        text = extractor.extract_text(stream)
    except NoTextLayerError as e:
        print(f"Scanned document without text ({e.page_count} pages)")
    except DocumentProcessingError as e:
        print(f"Could not extract text: {e}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class DocumentProcessingError(Exception):
    """
    Base exception for unsupported or unreadable document content.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "Could not extract text from this file",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class UnsupportedDocumentTypeError(DocumentProcessingError):
    """
    Raised when the declared content type is not on the allow-list.

    Attributes:
        content_type: The rejected content type
    """

    def __init__(self, content_type: Optional[str]):
        self.content_type = content_type
        super().__init__(
            message=f"Unsupported document type: {content_type or '<none>'}",
        )


# =============================================================================
# PDF ERRORS
# =============================================================================


class PDFError(DocumentProcessingError):
    """Base class for PDF-related errors."""

    def __init__(
        self,
        message: str = "PDF error",
        file_name: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.file_name = file_name
        if file_name:
            message = f"{message} [{file_name}]"
        super().__init__(message, details)


class PDFCorruptedError(PDFError):
    """
    Raised when the bytes are not a well-formed PDF or cannot be opened.

    Attributes:
        file_name: Declared name of the uploaded file
        original_error: The underlying error from the PDF library
    """

    def __init__(
        self,
        file_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        reason: Optional[str] = None,
    ):
        self.original_error = original_error
        details = reason or (str(original_error) if original_error else None)
        super().__init__(
            message="File is not a readable PDF",
            file_name=file_name,
            details=details,
        )


class PDFEncryptedError(PDFError):
    """Raised when the PDF is password protected."""

    def __init__(self, file_name: Optional[str] = None):
        super().__init__(
            message="PDF is encrypted and cannot be read",
            file_name=file_name,
        )


class NoTextLayerError(PDFError):
    """
    Raised when a PDF has no embedded text (e.g. a scanned, image-only PDF).

    No OCR is performed, so such documents cannot be processed.

    Attributes:
        page_count: Number of pages in the document
    """

    def __init__(self, page_count: int, file_name: Optional[str] = None):
        self.page_count = page_count
        super().__init__(
            message=f"No extractable text found in {page_count} page(s)",
            file_name=file_name,
        )


# =============================================================================
# CANCELLATION
# =============================================================================


class ExtractionCancelledError(DocumentProcessingError):
    """
    Raised when the caller cancels extraction while the stream is being read.

    Attributes:
        bytes_read: Number of bytes read before cancellation
    """

    def __init__(self, bytes_read: int = 0):
        self.bytes_read = bytes_read
        super().__init__(
            message="Document extraction was cancelled",
            details=f"{bytes_read} bytes read",
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: BaseException) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current: Optional[BaseException] = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if getattr(current, "original_error", None):
            current = current.original_error
            depth += 1
        elif current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
