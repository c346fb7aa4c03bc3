"""
Text-native PDF extraction utilities.

This module extracts the embedded (selectable) text of an uploaded PDF via
PyMuPDF. No OCR is performed: a PDF made only of scanned images has no text
layer and is rejected with NoTextLayerError.

The upload stream is read to completion in blocks before parsing starts. The
stream is always closed when extraction ends, whether it succeeds, fails or
is cancelled through an optional threading.Event.
"""

from __future__ import annotations

from contextlib import closing
import logging
import re
import threading
from typing import BinaryIO, Iterable, Optional

import fitz  # PyMuPDF

from .exceptions import (
    ExtractionCancelledError,
    NoTextLayerError,
    PDFCorruptedError,
    PDFEncryptedError,
)
from .models import ExtractedPage, ExtractionResult

logger = logging.getLogger(__name__)

DEFAULT_SUPPORTED_TYPES = frozenset({"application/pdf"})

# The PDF header may be preceded by up to 1024 bytes of junk.
_PDF_SIGNATURE = b"%PDF-"
_SIGNATURE_WINDOW = 1024


class TextExtractor:
    def __init__(
        self,
        supported_types: Iterable[str] = DEFAULT_SUPPORTED_TYPES,
        read_block_size: int = 64 * 1024,
        sort_blocks: bool = True,
        preserve_line_breaks: bool = True,
    ) -> None:
        self.supported_types = frozenset(t.strip().lower() for t in supported_types)
        self.read_block_size = read_block_size
        self.sort_blocks = sort_blocks
        self.preserve_line_breaks = preserve_line_breaks

    def is_supported_type(self, content_type: Optional[str]) -> bool:
        """True if the declared content type is on the allow-list."""
        if not content_type:
            return False
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in self.supported_types

    def extract_text(
        self,
        stream: BinaryIO,
        cancel_event: Optional[threading.Event] = None,
        file_name: Optional[str] = None,
    ) -> str:
        """
        Extract the plain text of a PDF stream.

        Raises:
            PDFCorruptedError: The bytes are not a readable PDF.
            PDFEncryptedError: The PDF is password protected.
            NoTextLayerError: No page carries embedded text.
            ExtractionCancelledError: cancel_event was set during extraction.
        """
        return self.extract(stream, cancel_event, file_name).text

    def extract(
        self,
        stream: BinaryIO,
        cancel_event: Optional[threading.Event] = None,
        file_name: Optional[str] = None,
    ) -> ExtractionResult:
        data = self._read_stream(stream, cancel_event)
        self._check_signature(data, file_name)

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise PDFCorruptedError(file_name, e) from e

        with doc:
            if doc.needs_pass:
                raise PDFEncryptedError(file_name)

            page_count = doc.page_count
            if page_count == 0:
                raise PDFCorruptedError(file_name, reason="PDF has no pages")
            logger.info("PDF has %d pages", page_count)

            pages: list[ExtractedPage] = []
            for page_number in range(1, page_count + 1):
                self._check_cancelled(cancel_event, len(data))
                try:
                    raw_text = self._extract_text_blocks(doc[page_number - 1])
                except Exception as e:
                    raise PDFCorruptedError(
                        file_name, e, reason=f"page {page_number}: {e}"
                    ) from e

                content = self._clean_text(raw_text)
                if content:
                    pages.append(ExtractedPage(page_number=page_number, content=content))

                if page_number % 10 == 0 and page_count > 20:
                    logger.info("Processed %d of %d pages", page_number, page_count)

        if not pages:
            raise NoTextLayerError(page_count, file_name)

        result = ExtractionResult(
            file_name=file_name or "document.pdf",
            page_count=page_count,
            pages=pages,
        )
        logger.info(
            "Extracted %d characters from PDF (%d pages, %d with text)",
            result.char_count, page_count, len(pages),
        )
        return result

    def _read_stream(
        self,
        stream: BinaryIO,
        cancel_event: Optional[threading.Event],
    ) -> bytes:
        data = bytearray()
        with closing(stream):
            seekable = getattr(stream, "seekable", None)
            if seekable is not None and seekable():
                stream.seek(0)
            while True:
                self._check_cancelled(cancel_event, len(data))
                block = stream.read(self.read_block_size)
                if not block:
                    break
                data.extend(block)
        return bytes(data)

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event], bytes_read: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.info("Extraction cancelled after %d bytes", bytes_read)
            raise ExtractionCancelledError(bytes_read)

    @staticmethod
    def _check_signature(data: bytes, file_name: Optional[str]) -> None:
        if not data:
            raise PDFCorruptedError(file_name, reason="file is empty")
        if _PDF_SIGNATURE not in data[:_SIGNATURE_WINDOW]:
            raise PDFCorruptedError(file_name, reason="missing %PDF- header")

    def _extract_text_blocks(self, page: fitz.Page) -> str:
        blocks = page.get_text("blocks", sort=False)
        if self.sort_blocks:
            blocks = sorted(blocks, key=lambda b: (b[1], b[0]))

        texts: list[str] = []
        for block in blocks:
            if len(block) < 5:
                continue
            text = block[4]
            block_type = block[-1] if isinstance(block[-1], int) else 0
            if block_type != 0:
                continue  # skip image blocks
            if text and text.strip():
                texts.append(text)

        return "\n\n".join(texts).strip()

    def _clean_text(self, text: str) -> str:
        if not text:
            return ""
        cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
        # De-hyphenate line breaks: "objec-\ntive" -> "objective"
        cleaned = re.sub(r"(?<=\w)-\n(?=\w)", "", cleaned)
        cleaned = re.sub(r"[ \t]+", " ", cleaned)
        if not self.preserve_line_breaks:
            cleaned = re.sub(r"(?<!\n)\n(?!\n)", " ", cleaned)
        cleaned = re.sub(r"\n{3,}", "\n\n", cleaned)
        return cleaned.strip()


_default_extractor = TextExtractor()


def is_supported_type(content_type: Optional[str]) -> bool:
    """True if the content type is on the default allow-list (application/pdf)."""
    return _default_extractor.is_supported_type(content_type)


def extract_text(
    stream: BinaryIO,
    cancel_event: Optional[threading.Event] = None,
) -> str:
    """Extract the plain text of a PDF stream with default settings."""
    return _default_extractor.extract_text(stream, cancel_event)
