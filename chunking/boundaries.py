"""
Boundary Splitting for the Chunking Pipeline

Regex-based paragraph, sentence and word boundary detection. Unlike a plain
sentence splitter, the span splitters are lossless: each piece keeps the
separator that follows it, so "".join(pieces) == text. This lets chunks be
re-assembled into the original document exactly.

Design:
- Paragraph boundary: a blank line (two newlines, optionally with spaces)
- Sentence boundary: .!? (plus closing quotes/brackets) followed by
  whitespace and an uppercase letter, digit or opening quote/bracket
- Common abbreviations (e.g., Mr., Dr., vs.) and ordinals (1.) are protected
  from triggering false sentence splits
- Word boundary: any run of whitespace
- No external dependencies (no spaCy, no NLTK)

Usage:
    from chunking.boundaries import split_sentence_spans

    split_sentence_spans("First sentence. Second one.")
    # ["First sentence. ", "Second one."]
"""

from __future__ import annotations

import re
from typing import Optional

# Placeholder character used to protect dots from sentence splitting.
# Same length as ".", so match offsets in the protected text stay valid.
_DOT_PLACEHOLDER = "\x00"

_ABBREVIATIONS = {
    # Titles
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st",
    # Latin / common
    "vs", "etc", "approx", "cf", "al", "ca", "incl", "excl", "misc",
    # Business
    "inc", "ltd", "co", "corp", "dept", "est", "no", "nos", "fig",
    # Months (abbreviated)
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec",
    # Units
    "min", "max", "hr", "hrs",
}

_ABBREV_PATTERN = re.compile(
    r"(?<!\w)(?:" + "|".join(re.escape(a) for a in sorted(_ABBREVIATIONS)) + r")\.(?=\s)",
    re.IGNORECASE,
)

# Multi-part abbreviations: e.g., i.e., U.S., a.m.
_MULTI_ABBREV_PATTERN = re.compile(r"\b[A-Za-z]\.(?:[A-Za-z]\.)+")

# Ordinal / list numbers before spaces: "1. ", "23. "
_ORDINAL_PATTERN = re.compile(r"(?:(?<=\s)|^)\d{1,3}\.(?=\s)")

_PARAGRAPH_BOUNDARY = re.compile(r"\n[ \t]*\n\s*")
_SENTENCE_BOUNDARY = re.compile(
    r"[.!?]+[\"'”’)\]]*\s+(?=[A-Z0-9\"'“‘(\[])"
)
_WORD_BOUNDARY = re.compile(r"\s+")


def _protect_dots(text: str) -> str:
    """Replace dots in abbreviations and ordinals with placeholders."""
    # Order matters: multi-part abbreviations first (e.g. before "g.")
    for pattern in (_MULTI_ABBREV_PATTERN, _ABBREV_PATTERN, _ORDINAL_PATTERN):
        text = pattern.sub(
            lambda m: m.group().replace(".", _DOT_PLACEHOLDER), text
        )
    return text


def _split_after(text: str, pattern: re.Pattern, scan_text: Optional[str] = None) -> list[str]:
    """
    Split text after every match of pattern, keeping the separator on the
    preceding piece.

    scan_text, when given, is searched instead of text; it must have the
    same length so offsets line up.
    """
    pieces: list[str] = []
    start = 0
    for match in pattern.finditer(scan_text if scan_text is not None else text):
        end = match.end()
        if end > start:
            pieces.append(text[start:end])
            start = end
    if start < len(text):
        pieces.append(text[start:])
    return pieces


def split_paragraph_spans(text: str) -> list[str]:
    """Lossless split at blank lines; each piece keeps its trailing separator."""
    if not text:
        return []
    return _split_after(text, _PARAGRAPH_BOUNDARY)


def split_sentence_spans(text: str) -> list[str]:
    """Lossless split at sentence boundaries; whitespace stays with the sentence."""
    if not text:
        return []
    return _split_after(text, _SENTENCE_BOUNDARY, scan_text=_protect_dots(text))


def split_word_spans(text: str) -> list[str]:
    """Lossless split at whitespace; each word keeps the whitespace after it."""
    if not text:
        return []
    return _split_after(text, _WORD_BOUNDARY)


# Coarsest to finest; the chunker descends this list when a piece is too big.
SPLITTERS = (split_paragraph_spans, split_sentence_spans, split_word_spans)
