"""
Data Models for the Chunking Pipeline

Defines:
1. ChunkingConfig - Token budgets and estimation settings
2. ChunkingStats - Summary of a chunking run, useful for logging

Design Principles:
- Pydantic v2 for validation and serialization (consistent with pdf_extractor)
- Budgets are configuration defaults, every call may override them

Usage:
    config = ChunkingConfig(max_chunk_tokens=500)
    chunker = ContentChunker(get_estimator(config.tokenizer, config.chars_per_token))
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ChunkingConfig(BaseModel):
    """
    Configuration for chunking and single-shot optimization.

    Defaults match the prompt sizes used by the OKR assistant: 4000 tokens
    for a single document prompt, 1000 tokens per chunk for sequential calls.
    """
    max_chunk_tokens: int = Field(
        1000,
        description="Default approximate token size of each chunk",
        ge=1,
    )
    max_prompt_tokens: int = Field(
        4000,
        description="Default token budget for single-shot optimization",
        ge=0,
    )
    chars_per_token: float = Field(
        4.0,
        description="Characters-per-token ratio of the heuristic estimator",
        gt=0,
    )
    min_keep_ratio: float = Field(
        0.6,
        description=(
            "When truncating, a paragraph or sentence boundary is only used "
            "if it keeps at least this share of the text that fits"
        ),
        ge=0.0,
        le=1.0,
    )
    tokenizer: Literal["heuristic", "tiktoken"] = Field(
        "heuristic",
        description="Token estimation strategy",
    )


class ChunkingStats(BaseModel):
    """Statistics about a chunking run."""
    total_chunks: int = 0
    total_tokens: int = 0
    avg_chunk_tokens: float = 0.0
    min_chunk_tokens: int = 0
    max_chunk_tokens: int = 0
    oversized_chunks: int = 0

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
