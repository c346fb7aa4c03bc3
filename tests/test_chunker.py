"""Tests for chunking.chunker."""

import pytest

from chunking import ContentChunker, InvalidArgumentError, chunk_content
from chunking.token_counter import count_tokens

PARAGRAPH = "word word word word word word word done."  # 40 chars
SENTENCE = "The team ships value. "  # 22 chars


class WordEstimator:
    """One token per whitespace-separated word."""

    def count(self, text):
        return len(text.split()) if text else 0


class TestBasicChunking:
    def test_short_text_single_chunk(self):
        assert chunk_content("Grow revenue.", 100) == ["Grow revenue."]

    def test_empty_text_single_chunk(self):
        assert chunk_content("", 10) == [""]

    def test_text_exactly_at_limit(self):
        text = "x" * 40  # 10 tokens
        assert chunk_content(text, 10) == [text]

    def test_deterministic(self, okr_document_text):
        first = chunk_content(okr_document_text, 60)
        second = chunk_content(okr_document_text, 60)
        assert first == second


class TestInvalidArguments:
    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_chunk_size(self, size):
        with pytest.raises(InvalidArgumentError) as exc_info:
            chunk_content("Some text", size)
        assert exc_info.value.argument == "approx_chunk_size_tokens"
        assert exc_info.value.value == size

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            chunk_content("Some text", 0)

    def test_empty_text_still_validated(self):
        with pytest.raises(InvalidArgumentError):
            chunk_content("", 0)


class TestRoundTrip:
    @pytest.mark.parametrize("size", [1, 5, 20, 60, 200, 10_000])
    def test_concatenation_reproduces_text(self, okr_document_text, size):
        chunks = chunk_content(okr_document_text, size)
        assert "".join(chunks) == okr_document_text

    def test_whitespace_heavy_text(self):
        text = "  Lead space.\n\n\n   Indented   paragraph with  gaps.\t\n\nEnd.  "
        chunks = chunk_content(text, 4)
        assert "".join(chunks) == text


class TestTokenLimits:
    @pytest.mark.parametrize("size", [5, 20, 60, 200])
    def test_no_chunk_exceeds_limit(self, okr_document_text, size):
        chunks = chunk_content(okr_document_text, size)
        assert len(chunks) > 1
        for chunk in chunks:
            assert count_tokens(chunk) <= size

    def test_long_word_allowed_to_exceed(self):
        long_word = "x" * 200
        text = f"Short intro. {long_word} short outro."
        chunks = chunk_content(text, 10)

        assert "".join(chunks) == text
        oversized = [c for c in chunks if count_tokens(c) > 10]
        assert len(oversized) == 1
        assert oversized[0].strip() == long_word

    def test_long_word_is_not_split(self):
        chunks = chunk_content("y" * 100, 3)
        assert chunks == ["y" * 100]


class TestBoundaryPreference:
    def test_breaks_at_paragraphs(self):
        text = "\n\n".join([PARAGRAPH] * 3)
        chunks = chunk_content(text, 11)
        assert chunks == [PARAGRAPH + "\n\n", PARAGRAPH + "\n\n", PARAGRAPH]

    def test_breaks_at_sentences_inside_large_paragraph(self):
        text = SENTENCE * 10
        chunks = chunk_content(text, 12)
        assert chunks == [SENTENCE * 2] * 5

    def test_never_breaks_mid_word(self, okr_document_text):
        chunks = chunk_content(okr_document_text, 5)
        for chunk in chunks[:-1]:
            assert chunk[-1].isspace()

    def test_packs_small_paragraphs_together(self):
        text = "\n\n".join(["Alpha.", "Beta.", "Gamma.", "Delta."])
        chunks = chunk_content(text, 6)
        assert len(chunks) == 2
        assert "".join(chunks) == text


class TestContentChunker:
    def test_custom_estimator(self):
        chunker = ContentChunker(WordEstimator())
        chunks = chunker.chunk("one two three four five six seven", 3)
        assert chunks == ["one two three ", "four five six ", "seven"]

    def test_module_function_accepts_estimator(self):
        chunks = chunk_content("one two three four", 2, estimator=WordEstimator())
        assert chunks == ["one two ", "three four"]

    def test_stats(self, okr_document_text):
        chunker = ContentChunker()
        chunks = chunker.chunk(okr_document_text, 60)
        stats = chunker.stats(chunks, 60)

        assert stats.total_chunks == len(chunks)
        assert stats.max_chunk_tokens <= 60
        assert stats.oversized_chunks == 0
        assert stats.min_chunk_tokens <= stats.avg_chunk_tokens <= stats.max_chunk_tokens

    def test_stats_empty(self):
        stats = ContentChunker().stats([], 10)
        assert stats.total_chunks == 0
