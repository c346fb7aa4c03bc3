"""
Content Chunker - splits long text into bounded chunks for sequential LLM calls

Algorithm:
1. If the whole text fits the token limit, return it as a single chunk.
2. Split the text into paragraphs (lossless, separators kept).
3. Greedily pack paragraphs into the current chunk while the estimate of the
   packed text stays within the limit.
4. A paragraph that is too large on its own is split into sentences and
   packed the same way; a sentence that is too large is split into words.
5. A single word larger than the limit becomes its own chunk (never cut
   mid-word).

Every piece keeps the separator that follows it, so "".join(chunks) == text.

Usage:
    from chunking import ContentChunker

    chunker = ContentChunker()
    chunks = chunker.chunk(document_text, 1000)
"""

from __future__ import annotations

import logging
from typing import Optional

from .boundaries import SPLITTERS
from .exceptions import InvalidArgumentError
from .models import ChunkingStats
from .token_counter import TokenEstimator, count_tokens

logger = logging.getLogger(__name__)


class ContentChunker:
    """
    Splits text into ordered chunks whose estimated token count does not
    exceed a caller-specified size, preferring paragraph, then sentence,
    then word boundaries.
    """

    def __init__(self, estimator: Optional[TokenEstimator] = None):
        self.estimator = estimator

    def count(self, text: str) -> int:
        return count_tokens(text, self.estimator)

    def chunk(self, text: str, approx_chunk_size_tokens: int) -> list[str]:
        """
        Split text into chunks of at most approx_chunk_size_tokens tokens.

        Args:
            text: The text to split.
            approx_chunk_size_tokens: Upper bound on each chunk's estimate.

        Returns:
            Ordered list of chunks. Text that fits in one chunk (including
            the empty string) is returned as a single-element list.

        Raises:
            InvalidArgumentError: If approx_chunk_size_tokens <= 0.
        """
        if approx_chunk_size_tokens is None or approx_chunk_size_tokens <= 0:
            raise InvalidArgumentError(
                "approx_chunk_size_tokens",
                approx_chunk_size_tokens,
                f"Chunk size must be a positive token count, got {approx_chunk_size_tokens!r}",
            )
        text = text or ""

        estimated = self.count(text)
        if estimated <= approx_chunk_size_tokens:
            logger.debug(
                "Text fits in a single chunk (%d/%d tokens)",
                estimated, approx_chunk_size_tokens,
            )
            return [text]

        chunks = self._pack(text, approx_chunk_size_tokens, level=0)
        logger.info(
            "Text of ~%d tokens split into %d chunks of ~%d tokens",
            estimated, len(chunks), approx_chunk_size_tokens,
        )
        return chunks

    def stats(self, chunks: list[str], approx_chunk_size_tokens: int) -> ChunkingStats:
        """Compute statistics about a list of chunks."""
        if not chunks:
            return ChunkingStats()
        token_counts = [self.count(c) for c in chunks]
        return ChunkingStats(
            total_chunks=len(chunks),
            total_tokens=sum(token_counts),
            avg_chunk_tokens=sum(token_counts) / len(token_counts),
            min_chunk_tokens=min(token_counts),
            max_chunk_tokens=max(token_counts),
            oversized_chunks=sum(1 for n in token_counts if n > approx_chunk_size_tokens),
        )

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    def _pack(self, text: str, limit: int, level: int) -> list[str]:
        """
        Greedy packing of the pieces produced by SPLITTERS[level].

        Pieces that do not fit on their own are packed recursively at the
        next finer level. The last sub-chunk of such a piece stays open so
        following pieces can still be added to it.
        """
        chunks: list[str] = []
        current = ""

        for piece in SPLITTERS[level](text):
            candidate = current + piece
            if self.count(candidate) <= limit:
                current = candidate
                continue

            if current:
                chunks.append(current)
                current = ""

            if self.count(piece) <= limit:
                current = piece
            elif level + 1 >= len(SPLITTERS):
                # A single word over the limit; it cannot be split further.
                logger.debug("Word of %d characters exceeds chunk size", len(piece))
                chunks.append(piece)
            else:
                sub_chunks = self._pack(piece, limit, level + 1)
                chunks.extend(sub_chunks[:-1])
                current = sub_chunks[-1]

        if current:
            chunks.append(current)
        return chunks


_default_chunker = ContentChunker()


def chunk_content(
    text: str,
    approx_chunk_size_tokens: int,
    estimator: Optional[TokenEstimator] = None,
) -> list[str]:
    """Split text into bounded chunks. See ContentChunker.chunk."""
    chunker = ContentChunker(estimator) if estimator is not None else _default_chunker
    return chunker.chunk(text, approx_chunk_size_tokens)
