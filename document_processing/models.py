"""
Data Models for the document processing service and its HTTP surface
"""

from typing import Optional

from pydantic import BaseModel, Field


class PreparedDocument(BaseModel):
    """An uploaded document turned into prompt-ready text."""
    file_name: str = Field(..., description="Declared name of the uploaded file")
    content_type: str = Field(..., description="Declared content type")
    page_count: int = Field(..., ge=0, description="Pages in the source PDF")
    content: str = Field(..., description="Cleaned text, fitted to the token budget")
    estimated_tokens: int = Field(..., ge=0, description="Estimated tokens of content")
    original_tokens: int = Field(..., ge=0, description="Estimated tokens before fitting")
    truncated: bool = Field(False, description="True if content was cut to fit the budget")


class ChunkRequest(BaseModel):
    content: str
    chunk_size: Optional[int] = Field(
        None,
        description="Approximate tokens per chunk (default from configuration)",
    )


class ChunkResponse(BaseModel):
    chunks: list[str]
    total_chunks: int
    token_counts: list[int]


class ModelResponseRequest(BaseModel):
    text: str = Field(..., description="Raw text returned by the chat model")


class SanitizeResponse(BaseModel):
    json_text: str = Field(..., description="Parseable JSON text")
    repairs: list[str] = Field(default_factory=list)
    degraded: bool = False
