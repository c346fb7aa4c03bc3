"""Tests for pdf_extractor.text_extractor."""

import io
import threading

import pytest

from pdf_extractor import (
    DocumentProcessingError,
    ExtractionCancelledError,
    NoTextLayerError,
    PDFCorruptedError,
    PDFEncryptedError,
    TextExtractor,
    extract_text,
    is_supported_type,
)


class TestIsSupportedType:
    def test_pdf_supported(self):
        assert is_supported_type("application/pdf") is True

    def test_case_insensitive(self):
        assert is_supported_type("Application/PDF") is True

    def test_ignores_parameters(self):
        assert is_supported_type("application/pdf; charset=binary") is True

    def test_image_not_supported(self):
        assert is_supported_type("image/png") is False

    def test_empty_and_none(self):
        assert is_supported_type("") is False
        assert is_supported_type(None) is False

    def test_custom_allow_list(self):
        extractor = TextExtractor(supported_types=["application/pdf", "application/x-pdf"])
        assert extractor.is_supported_type("application/x-pdf") is True
        assert extractor.is_supported_type("text/plain") is False


class TestExtractText:
    def test_extracts_embedded_text(self, pdf_stream):
        text = extract_text(pdf_stream)
        assert "Grow the customer base." in text
        assert "Cut setup time by half." in text

    def test_pages_in_order(self, pdf_stream):
        text = extract_text(pdf_stream)
        assert text.index("Grow the customer base") < text.index("Improve onboarding")

    def test_extract_result_pages(self, pdf_stream):
        result = TextExtractor().extract(pdf_stream, file_name="okrs.pdf")
        assert result.file_name == "okrs.pdf"
        assert result.page_count == 2
        assert [p.page_number for p in result.pages] == [1, 2]
        assert "\n\n" in result.text
        assert result.char_count == len(result.text)

    def test_small_read_blocks(self, pdf_bytes):
        extractor = TextExtractor(read_block_size=7)
        text = extractor.extract_text(io.BytesIO(pdf_bytes))
        assert "Sign 20 new accounts." in text

    def test_rewinds_stream(self, pdf_stream):
        pdf_stream.seek(25)
        assert "Grow the customer base." in extract_text(pdf_stream)

    def test_stream_closed_after_success(self, pdf_stream):
        extract_text(pdf_stream)
        assert pdf_stream.closed


class TestExtractionErrors:
    def test_non_pdf_bytes(self):
        stream = io.BytesIO(b"PK\x03\x04 this is a zip archive, not a PDF")
        with pytest.raises(DocumentProcessingError):
            extract_text(stream)

    def test_non_pdf_is_corrupted_error(self):
        with pytest.raises(PDFCorruptedError) as exc_info:
            extract_text(io.BytesIO(b"plain text upload"))
        assert "header" in str(exc_info.value)

    def test_empty_stream(self):
        with pytest.raises(PDFCorruptedError):
            extract_text(io.BytesIO(b""))

    def test_truncated_pdf(self):
        with pytest.raises(DocumentProcessingError):
            extract_text(io.BytesIO(b"%PDF-1.7\n1 0 obj\n<< /Type /Catalog"))

    def test_scanned_pdf_without_text(self, scanned_pdf_bytes):
        with pytest.raises(NoTextLayerError) as exc_info:
            extract_text(io.BytesIO(scanned_pdf_bytes))
        assert exc_info.value.page_count == 1

    def test_encrypted_pdf(self, encrypted_pdf_bytes):
        with pytest.raises(PDFEncryptedError):
            extract_text(io.BytesIO(encrypted_pdf_bytes))

    def test_stream_closed_after_failure(self):
        stream = io.BytesIO(b"not a pdf")
        with pytest.raises(DocumentProcessingError):
            extract_text(stream)
        assert stream.closed

    def test_file_name_in_message(self):
        extractor = TextExtractor()
        with pytest.raises(PDFCorruptedError) as exc_info:
            extractor.extract_text(io.BytesIO(b"nope"), file_name="plan.docx")
        assert exc_info.value.file_name == "plan.docx"
        assert "plan.docx" in str(exc_info.value)


class TestCancellation:
    def test_cancelled_before_read(self, pdf_stream):
        event = threading.Event()
        event.set()
        with pytest.raises(ExtractionCancelledError) as exc_info:
            extract_text(pdf_stream, cancel_event=event)
        assert exc_info.value.bytes_read == 0
        assert pdf_stream.closed

    def test_unset_event_does_not_cancel(self, pdf_stream):
        event = threading.Event()
        assert "Improve onboarding." in extract_text(pdf_stream, cancel_event=event)

    def test_cancelled_during_read(self, pdf_bytes):
        event = threading.Event()

        class CancellingStream(io.BytesIO):
            def read(self, size=-1):
                data = super().read(size)
                event.set()
                return data

        stream = CancellingStream(pdf_bytes)
        extractor = TextExtractor(read_block_size=16)
        with pytest.raises(ExtractionCancelledError) as exc_info:
            extractor.extract_text(stream, cancel_event=event)
        assert exc_info.value.bytes_read == 16
        assert stream.closed


class TestCleanText:
    def test_dehyphenates_line_breaks(self):
        assert TextExtractor()._clean_text("objec-\ntive   set") == "objective set"

    def test_collapses_blank_lines(self):
        assert TextExtractor()._clean_text("a\n\n\n\nb") == "a\n\nb"

    def test_joins_lines_when_not_preserving(self):
        extractor = TextExtractor(preserve_line_breaks=False)
        assert extractor._clean_text("one\ntwo\n\nthree") == "one two\n\nthree"
