import logging

from fastapi import FastAPI, File, HTTPException, UploadFile
import uvicorn

from chunking import InvalidArgumentError
from pdf_extractor import (
    DocumentProcessingError,
    RawDocument,
    UnsupportedDocumentTypeError,
    format_error_chain,
)
from llm_json import IntentAnalysis

from .config import DocumentProcessingConfig
from .logging_config import setup_logging
from .models import (
    ChunkRequest,
    ChunkResponse,
    ModelResponseRequest,
    PreparedDocument,
    SanitizeResponse,
)
from .service import DocumentProcessingService

logger = logging.getLogger(__name__)


def create_app(config: DocumentProcessingConfig | None = None) -> FastAPI:
    service = DocumentProcessingService(config=config)
    app = FastAPI(
        title="Document Processing Service",
        version="1.0.0",
        description="PDF text extraction, prompt budgeting and model-response repair.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/documents/extract", response_model=PreparedDocument)
    def extract(
        file: UploadFile = File(...),
        max_tokens: int | None = None,
    ) -> PreparedDocument:
        document = RawDocument(
            stream=file.file,
            content_type=file.content_type or "",
            file_name=file.filename or "document.pdf",
        )
        try:
            return service.prepare_upload(document, max_tokens=max_tokens)
        except UnsupportedDocumentTypeError as exc:
            raise HTTPException(status_code=415, detail=exc.message) from exc
        except DocumentProcessingError as exc:
            logger.warning("Could not extract text:\n%s", format_error_chain(exc))
            raise HTTPException(
                status_code=422,
                detail=f"Could not extract text from this file: {exc.message}",
            ) from exc
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/documents/chunk", response_model=ChunkResponse)
    def chunk(request: ChunkRequest) -> ChunkResponse:
        try:
            chunks = service.chunk_document_content(request.content, request.chunk_size)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ChunkResponse(
            chunks=chunks,
            total_chunks=len(chunks),
            token_counts=[service.estimate_token_count(c) for c in chunks],
        )

    @app.post("/responses/sanitize", response_model=SanitizeResponse)
    def sanitize(request: ModelResponseRequest) -> SanitizeResponse:
        result = service.sanitize_model_response(request.text)
        return SanitizeResponse(
            json_text=result.text,
            repairs=list(result.repairs),
            degraded=result.used_fallback,
        )

    @app.post("/responses/intents", response_model=IntentAnalysis)
    def intents(request: ModelResponseRequest) -> IntentAnalysis:
        return service.parse_intents(request.text)

    return app


app = create_app()


def main() -> None:
    config = DocumentProcessingConfig.from_env()
    setup_logging(config.log_level)
    uvicorn.run(create_app(config), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
