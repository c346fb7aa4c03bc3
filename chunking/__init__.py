"""
Chunking Module - token estimation, chunking and budget fitting for LLM prompts

Turns extracted document text into prompt-sized pieces: either one text that
fits a single-call token budget, or an ordered list of bounded chunks for
sequential calls. Chunk boundaries prefer paragraphs, then sentences, then
words, and the chunks concatenate back to the original text.

Quick Start:
    from chunking import ContentChunker, ContentOptimizer, count_tokens

    n = count_tokens(text)
    chunks = ContentChunker().chunk(text, 1000)
    prompt_text = ContentOptimizer().optimize(text, 4000)
"""

__version__ = "1.0.0"

from .boundaries import (
    split_paragraph_spans,
    split_sentence_spans,
    split_word_spans,
)
from .chunker import ContentChunker, chunk_content
from .exceptions import InvalidArgumentError
from .models import ChunkingConfig, ChunkingStats
from .optimizer import ContentOptimizer, clean_document_text, optimize_for_budget
from .token_counter import (
    HeuristicTokenEstimator,
    TiktokenEstimator,
    TokenEstimator,
    count_tokens,
    count_tokens_batch,
    estimate_token_count,
    get_estimator,
)

__all__ = [
    "__version__",
    "ContentChunker",
    "ContentOptimizer",
    "ChunkingConfig",
    "ChunkingStats",
    "InvalidArgumentError",
    "TokenEstimator",
    "HeuristicTokenEstimator",
    "TiktokenEstimator",
    "chunk_content",
    "clean_document_text",
    "optimize_for_budget",
    "count_tokens",
    "count_tokens_batch",
    "estimate_token_count",
    "get_estimator",
    "split_paragraph_spans",
    "split_sentence_spans",
    "split_word_spans",
]
