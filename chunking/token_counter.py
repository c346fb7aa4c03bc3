"""
Token Counter for the Chunking Pipeline

Token counts are estimated, not computed by a tokenizer service. The default
strategy is a fixed characters-per-token ratio (about 4 characters per token
for English prose), which is cheap, deterministic and monotonically
non-decreasing in text length.

A real tokenizer can be plugged in through the TokenEstimator protocol.
TiktokenEstimator uses tiktoken with the cl100k_base encoding.

Usage:
    from chunking.token_counter import count_tokens, get_estimator

    n = count_tokens("Increase quarterly revenue by 10%.")
    estimator = get_estimator("tiktoken")
    n = estimator.count("Increase quarterly revenue by 10%.")
"""

from __future__ import annotations

import math
from typing import Optional, Protocol, runtime_checkable

import tiktoken

DEFAULT_CHARS_PER_TOKEN = 4.0


@runtime_checkable
class TokenEstimator(Protocol):
    """Anything that can turn a text into an approximate token count."""

    def count(self, text: Optional[str]) -> int:
        ...


class HeuristicTokenEstimator:
    """Estimates tokens as ceil(len(text) / chars_per_token)."""

    def __init__(self, chars_per_token: float = DEFAULT_CHARS_PER_TOKEN):
        if chars_per_token <= 0:
            raise ValueError(
                f"chars_per_token must be positive, got {chars_per_token}"
            )
        self.chars_per_token = chars_per_token

    def count(self, text: Optional[str]) -> int:
        if not text:
            return 0
        return math.ceil(len(text) / self.chars_per_token)

    def __repr__(self) -> str:
        return f"HeuristicTokenEstimator(chars_per_token={self.chars_per_token})"


class TiktokenEstimator:
    """
    Counts tokens with a tiktoken encoding.

    The encoding is loaded on first use, since tiktoken may need to fetch
    the BPE ranks the first time an encoding is requested.
    """

    def __init__(
        self,
        encoding_name: str = "cl100k_base",
        encoding: Optional[tiktoken.Encoding] = None,
    ):
        self.encoding_name = encoding_name
        self._encoding = encoding

    def _get_encoding(self) -> tiktoken.Encoding:
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding(self.encoding_name)
        return self._encoding

    def count(self, text: Optional[str]) -> int:
        if not text:
            return 0
        return len(self._get_encoding().encode(text))

    def __repr__(self) -> str:
        return f"TiktokenEstimator(encoding_name={self.encoding_name!r})"


_ESTIMATORS = {
    "heuristic": HeuristicTokenEstimator,
    "tiktoken": TiktokenEstimator,
}

# Shared default - estimators are stateless apart from a lazily loaded encoding.
_default_estimator: TokenEstimator = HeuristicTokenEstimator()


def get_estimator(
    name: str = "heuristic",
    chars_per_token: float = DEFAULT_CHARS_PER_TOKEN,
) -> TokenEstimator:
    """
    Build a token estimator by name.

    Args:
        name: "heuristic" or "tiktoken".
        chars_per_token: Ratio used by the heuristic estimator.

    Returns:
        A TokenEstimator instance.

    Raises:
        ValueError: If the name is unknown.
    """
    key = name.strip().lower()
    if key not in _ESTIMATORS:
        raise ValueError(
            f"Unknown tokenizer {name!r}; expected one of {sorted(_ESTIMATORS)}"
        )
    if key == "heuristic":
        return HeuristicTokenEstimator(chars_per_token)
    return TiktokenEstimator()


def count_tokens(text: Optional[str], estimator: Optional[TokenEstimator] = None) -> int:
    """
    Estimate the number of tokens in a text string.

    Args:
        text: The text to measure. None and "" count as 0.
        estimator: Strategy to use (default: 4 characters per token).

    Returns:
        Non-negative estimated token count.
    """
    return (estimator or _default_estimator).count(text)


# Name used by the document processing service interface.
estimate_token_count = count_tokens


def count_tokens_batch(
    texts: list[str],
    estimator: Optional[TokenEstimator] = None,
) -> list[int]:
    """
    Count tokens for a list of texts.

    Args:
        texts: List of text strings.
        estimator: Strategy to use (default: 4 characters per token).

    Returns:
        List of token counts, one per input text.
    """
    estimator = estimator or _default_estimator
    return [estimator.count(t) for t in texts]
