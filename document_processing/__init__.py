"""
Document Processing - one entry point for the document and chat workflows

Quick Start:
    from document_processing import DocumentProcessingService, RawDocument

    service = DocumentProcessingService()
    prepared = service.prepare_upload(
        RawDocument(stream=upload.file, content_type="application/pdf", file_name="plan.pdf")
    )
    chunks = service.chunk_document_content(prepared.content, 1000)
    intents = service.parse_intents(model_output)
"""

__version__ = "1.0.0"

from pdf_extractor.models import RawDocument

from .config import DocumentProcessingConfig
from .logging_config import setup_logging
from .models import PreparedDocument
from .service import DocumentProcessingService, DocumentProcessor

__all__ = [
    "__version__",
    "DocumentProcessingService",
    "DocumentProcessor",
    "DocumentProcessingConfig",
    "PreparedDocument",
    "RawDocument",
    "setup_logging",
]
