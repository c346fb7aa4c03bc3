"""
Content Optimizer - fits document text into a single-prompt token budget

Text that already fits is returned unchanged. Larger text is truncated from
the end, keeping the leading content, and cut at the cleanest boundary that
still keeps most of what fits: a paragraph break, else a sentence end, else a
word break. A short note telling the model the document was truncated is
appended when there is room for it.

Usage:
    from chunking import ContentOptimizer

    optimizer = ContentOptimizer()
    prompt_text = optimizer.optimize(document_text, max_tokens=4000)
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .boundaries import split_paragraph_spans, split_sentence_spans, split_word_spans
from .exceptions import InvalidArgumentError
from .token_counter import TokenEstimator, count_tokens

logger = logging.getLogger(__name__)

TRUNCATION_NOTE = (
    "\n\n[Note: This document has been truncated to fit within token limits. "
    "The full document is {length} characters.]"
)

_PAGE_MARKER = re.compile(r"---\s*Page\s+\d+\s*---", re.IGNORECASE)


def clean_document_text(text: Optional[str]) -> str:
    """
    Normalize extracted document text before it is sent to a model.

    Collapses runs of blank lines, drops "--- Page N ---" markers, collapses
    runs of spaces/tabs and trims the result.
    """
    if not text:
        return ""
    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = re.sub(r"\n{3,}", "\n\n", cleaned)
    cleaned = _PAGE_MARKER.sub("", cleaned)
    cleaned = re.sub(r"[ \t]+", " ", cleaned)
    return cleaned.strip()


class ContentOptimizer:
    """Truncates text at natural boundaries so it fits a token budget."""

    def __init__(
        self,
        estimator: Optional[TokenEstimator] = None,
        min_keep_ratio: float = 0.6,
        add_truncation_note: bool = True,
    ):
        self.estimator = estimator
        self.min_keep_ratio = min_keep_ratio
        self.add_truncation_note = add_truncation_note

    def count(self, text: str) -> int:
        return count_tokens(text, self.estimator)

    def optimize(self, text: str, max_tokens: int) -> str:
        """
        Return text unchanged if it fits max_tokens, else a truncated version
        whose estimate is within max_tokens.

        Raises:
            InvalidArgumentError: If max_tokens is negative.
        """
        if max_tokens is None or max_tokens < 0:
            raise InvalidArgumentError(
                "max_tokens",
                max_tokens,
                f"Token budget must not be negative, got {max_tokens!r}",
            )
        text = text or ""

        estimated = self.count(text)
        if estimated <= max_tokens:
            logger.debug("Content fits within token limit (%d/%d)", estimated, max_tokens)
            return text

        logger.info(
            "Content exceeds token limit (%d/%d), truncating", estimated, max_tokens
        )

        note = TRUNCATION_NOTE.format(length=len(text)) if self.add_truncation_note else ""
        body_budget = max_tokens - self.count(note)
        if body_budget <= 0:
            note = ""
            body_budget = max_tokens

        body = self._truncate(text, body_budget)
        result = body + note if body else ""
        if self.count(result) > max_tokens:
            result = body

        logger.info(
            "Truncated content from %d to %d characters (~%d tokens)",
            len(text), len(result), self.count(result),
        )
        return result

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    def _truncate(self, text: str, budget: int) -> str:
        """Longest clean prefix of text whose estimate fits budget."""
        prefix = self._fitting_word_prefix(text, budget)
        if not prefix:
            return ""

        min_keep = int(len(prefix) * self.min_keep_ratio)
        for splitter in (split_paragraph_spans, split_sentence_spans):
            cut = self._last_boundary(prefix, splitter)
            if cut >= min_keep and cut > 0:
                return prefix[:cut].rstrip()
        return prefix.rstrip()

    def _fitting_word_prefix(self, text: str, budget: int) -> str:
        """
        Binary search over word boundaries for the longest prefix within
        budget. Relies on the estimate being non-decreasing in prefix length.
        """
        ends: list[int] = []
        pos = 0
        for word in split_word_spans(text):
            pos += len(word)
            ends.append(pos)

        lo, hi = 0, len(ends)
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if self.count(text[: ends[mid - 1]].rstrip()) <= budget:
                lo = mid
            else:
                hi = mid - 1

        # Walk back for estimators that are not perfectly monotonic.
        while lo > 0 and self.count(text[: ends[lo - 1]].rstrip()) > budget:
            lo -= 1
        return text[: ends[lo - 1]] if lo else ""

    @staticmethod
    def _last_boundary(prefix: str, splitter) -> int:
        """
        Offset just past the last complete boundary piece of prefix, or 0.

        The final piece is excluded, since it may have been cut short.
        """
        pieces = splitter(prefix)
        if len(pieces) < 2:
            return 0
        return len(prefix) - len(pieces[-1])


_default_optimizer = ContentOptimizer()


def optimize_for_budget(
    text: str,
    max_tokens: int,
    estimator: Optional[TokenEstimator] = None,
) -> str:
    """Fit text into max_tokens. See ContentOptimizer.optimize."""
    optimizer = ContentOptimizer(estimator) if estimator is not None else _default_optimizer
    return optimizer.optimize(text, max_tokens)
