"""
Document Processing Service - the pipeline behind document upload and chat

Composes token estimation, chunking, budget fitting, PDF text extraction and
model-response sanitization behind one interface. The service holds only
configuration and stateless helpers, so one instance can be shared across
concurrent requests.

Usage:
    from document_processing import DocumentProcessingService

    service = DocumentProcessingService()
    if service.is_supported_file_type(upload.content_type):
        text = service.extract_text_from_pdf(upload.file)
        prompt_text = service.prepare_content_for_model(text)
"""

from __future__ import annotations

import logging
import threading
from typing import BinaryIO, Optional, Protocol, runtime_checkable

from chunking import (
    ContentChunker,
    ContentOptimizer,
    TokenEstimator,
    clean_document_text,
    get_estimator,
)
from llm_json import IntentAnalysis, SanitizationResult, parse_intents, sanitize
from pdf_extractor import RawDocument, TextExtractor, UnsupportedDocumentTypeError

from .config import DocumentProcessingConfig
from .models import PreparedDocument

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentProcessor(Protocol):
    """Capability interface consumed by the upload and import workflows."""

    def extract_text_from_pdf(
        self,
        pdf_stream: BinaryIO,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        ...

    def is_supported_file_type(self, content_type: Optional[str]) -> bool:
        ...

    def prepare_content_for_model(
        self, content: str, max_tokens: Optional[int] = None
    ) -> str:
        ...

    def chunk_document_content(
        self, content: str, chunk_size: Optional[int] = None
    ) -> list[str]:
        ...

    def estimate_token_count(self, text: Optional[str]) -> int:
        ...


class DocumentProcessingService:
    """Default DocumentProcessor, built from a DocumentProcessingConfig."""

    def __init__(
        self,
        config: DocumentProcessingConfig | None = None,
        estimator: TokenEstimator | None = None,
    ):
        self.config = config or DocumentProcessingConfig()
        chunking = self.config.chunking
        self.estimator = estimator or get_estimator(
            chunking.tokenizer, chunking.chars_per_token
        )
        self.extractor = TextExtractor(
            supported_types=self.config.supported_content_types,
            read_block_size=self.config.read_block_size,
        )
        self.chunker = ContentChunker(self.estimator)
        self.optimizer = ContentOptimizer(
            self.estimator, min_keep_ratio=chunking.min_keep_ratio
        )

    def extract_text_from_pdf(
        self,
        pdf_stream: BinaryIO,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        return self.extractor.extract_text(pdf_stream, cancel_event)

    def is_supported_file_type(self, content_type: Optional[str]) -> bool:
        return self.extractor.is_supported_type(content_type)

    def prepare_content_for_model(
        self, content: str, max_tokens: Optional[int] = None
    ) -> str:
        budget = self.config.max_prompt_tokens if max_tokens is None else max_tokens
        return self.optimizer.optimize(content, budget)

    def chunk_document_content(
        self, content: str, chunk_size: Optional[int] = None
    ) -> list[str]:
        size = self.config.max_chunk_tokens if chunk_size is None else chunk_size
        return self.chunker.chunk(content, size)

    def estimate_token_count(self, text: Optional[str]) -> int:
        return self.estimator.count(text)

    def sanitize_model_response(self, raw_text: Optional[str]) -> SanitizationResult:
        return sanitize(raw_text)

    def parse_intents(self, raw_text: Optional[str]) -> IntentAnalysis:
        return parse_intents(raw_text)

    def prepare_upload(
        self,
        document: RawDocument,
        max_tokens: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> PreparedDocument:
        """
        Turn an uploaded document into prompt-ready text.

        Raises:
            UnsupportedDocumentTypeError: The content type is not accepted.
            DocumentProcessingError: The document could not be read.
            InvalidArgumentError: max_tokens is negative.
        """
        if not self.is_supported_file_type(document.content_type):
            document.stream.close()
            raise UnsupportedDocumentTypeError(document.content_type)

        extraction = self.extractor.extract(
            document.stream, cancel_event, file_name=document.file_name
        )
        cleaned = clean_document_text(extraction.text)
        original_tokens = self.estimate_token_count(cleaned)
        content = self.prepare_content_for_model(cleaned, max_tokens)
        estimated_tokens = self.estimate_token_count(content)

        logger.info(
            "Prepared %s: %d chars, ~%d tokens (from ~%d)",
            document.file_name, len(content), estimated_tokens, original_tokens,
        )
        return PreparedDocument(
            file_name=document.file_name,
            content_type=document.content_type,
            page_count=extraction.page_count,
            content=content,
            estimated_tokens=estimated_tokens,
            original_tokens=original_tokens,
            truncated=content != cleaned,
        )
